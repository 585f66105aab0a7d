"""Prompt repository tests"""

import json

import pytest

from app.services.prompt_store import DEFAULT_PROMPTS, PromptRepository


class TestPromptRepository:
    """Test file-backed prompt storage"""

    @pytest.fixture
    def repository(self, tmp_path):
        """Create repository with temp directory"""
        return PromptRepository(tmp_path / "prompts")

    def test_first_load_writes_defaults(self, repository):
        prompts = repository.load_all()
        assert [p.id for p in prompts] == [p.id for p in DEFAULT_PROMPTS]
        assert repository.prompts_file.exists()

    def test_corrupt_file_falls_back_to_defaults(self, repository):
        repository.prompts_dir.mkdir(parents=True)
        repository.prompts_file.write_text("{not json", encoding="utf-8")
        assert len(repository.load_all()) == len(DEFAULT_PROMPTS)

    def test_create_persists(self, repository):
        prompt = repository.create("Test Persona", "persona", "test-target", "Hello {brand_name}")

        assert prompt.id.startswith("custom-")
        assert prompt.is_custom is True
        stored = json.loads(repository.prompts_file.read_text(encoding="utf-8"))
        assert stored[-1]["id"] == prompt.id

    def test_get_for_target(self, repository):
        assert repository.get_for_target("gen-z").id == "persona-gen-z-v1"
        assert repository.get_for_target(None, "system").id == "brand-conversation-facilitator"
        assert repository.get_for_target("nobody") is None

    def test_update(self, repository):
        updated = repository.update("persona-boomer-v1", {"name": "Boomer v2", "is_active": False})

        assert updated.name == "Boomer v2"
        assert updated.is_active is False
        assert updated.is_custom is True
        assert updated.created_at == "2024-01-01T00:00:00.000Z"
        assert repository.get_for_target("boomer") is None

    def test_update_unknown(self, repository):
        assert repository.update("missing", {"name": "x"}) is None

    def test_delete(self, repository):
        assert repository.delete("persona-gen-x-v1") is True
        assert repository.delete("persona-gen-x-v1") is False
