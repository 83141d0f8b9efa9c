"""Unit tests for the script runner."""

import asyncio

import pytest

from mongo_fixtures.classifier import classify
from mongo_fixtures.errors import ScriptContractError
from mongo_fixtures.protocols import Failure, Success
from mongo_fixtures.resolvers import ModuleRegistry
from mongo_fixtures.scripts import run_script


@pytest.fixture
def script_fixture(fixtures_dir):
    return classify("users_.js", str(fixtures_dir))


class TestRunScript:
    """Tests for run_script()."""

    @pytest.mark.asyncio
    async def test_receives_target_collection(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry()
        seen = []

        @registry.script("users_.js")
        async def seed(collection):
            seen.append(collection.name)
            await collection.insert_one({"name": "admin"})

        result = await run_script(fake_db, script_fixture, registry, mock_logger)

        assert seen == ["users"]
        assert result == Success(None)
        assert fake_db.get_collection("users").documents == [{"name": "admin"}]
        mock_logger.info.assert_any_call("script_done", script="users_.js")

    @pytest.mark.asyncio
    async def test_plain_value_wrapped_in_success(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry()

        @registry.script("users_.js")
        async def seed(collection):
            return 42

        assert await run_script(fake_db, script_fixture, registry, mock_logger) == Success(42)

    @pytest.mark.asyncio
    async def test_success_passed_through(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry()

        @registry.script("users_.js")
        async def seed(collection):
            return Success("done")

        assert await run_script(fake_db, script_fixture, registry, mock_logger) == Success("done")

    @pytest.mark.asyncio
    async def test_future_is_accepted(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry()

        def seed(collection):
            future = asyncio.get_running_loop().create_future()
            future.set_result("resolved")
            return future

        registry.register("users_.js", seed)

        assert await run_script(fake_db, script_fixture, registry, mock_logger) == Success("resolved")

    @pytest.mark.asyncio
    async def test_failure_outcome_raises_its_error(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry()
        error = RuntimeError("seed failed")

        @registry.script("users_.js")
        async def seed(collection):
            return Failure(error)

        with pytest.raises(RuntimeError) as exc_info:
            await run_script(fake_db, script_fixture, registry, mock_logger)
        assert exc_info.value is error
        mock_logger.error.assert_called_once_with("script_error", script="users_.js", error="seed failed")

    @pytest.mark.asyncio
    async def test_raised_error_propagates(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry()

        @registry.script("users_.js")
        async def seed(collection):
            raise ValueError("bad seed")

        with pytest.raises(ValueError, match="bad seed"):
            await run_script(fake_db, script_fixture, registry, mock_logger)

    @pytest.mark.asyncio
    async def test_non_awaitable_result_is_contract_error(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry()
        registry.register("users_.js", lambda collection: None)

        with pytest.raises(ScriptContractError) as exc_info:
            await run_script(fake_db, script_fixture, registry, mock_logger)
        assert exc_info.value.script == "users_.js"
        assert "awaitable" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_callable_export_is_contract_error(self, fake_db, script_fixture, mock_logger):
        registry = ModuleRegistry({"users_.js": [{"name": "a"}]})

        with pytest.raises(ScriptContractError, match="users_.js"):
            await run_script(fake_db, script_fixture, registry, mock_logger)
