"""Unit tests for prompt loading."""
import pytest

from cognitutor.prompts import clear_cache, get_image_prompt, get_system_prompt, load_prompt


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_cache()
    yield
    clear_cache()


def test_packaged_prompts_load():
    """Test that both packaged prompts exist and are stripped."""
    system = get_system_prompt()

    assert "CogniLearn" in system
    assert system == system.rstrip()
    assert get_image_prompt()


def test_working_directory_overrides_package(tmp_path, monkeypatch):
    """Test that ./prompts/ takes precedence over the packaged file."""
    (tmp_path / "prompts").mkdir()
    (tmp_path / "prompts" / "tutor_system.txt").write_text("Custom persona\n\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert get_system_prompt() == "Custom persona"


def test_missing_prompt(tmp_path, monkeypatch):
    """Test that an unknown prompt lists the searched locations."""
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError, match="Searched"):
        load_prompt("no_such_prompt")
