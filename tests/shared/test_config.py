from awesome_projects.shared.config import Settings


def test_settings_defaults():
    settings = Settings()

    assert settings.input_path == "README.md"
    assert settings.tmp_dir == "tmp"
    assert settings.parsed_projects_file == "parsed_projects.txt"
    assert settings.projects_section == "## 🚀 Projects"
    assert settings.allow_reentry is False
    assert settings.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("AWESOME_PROJECTS_INPUT_PATH", "docs/README.md")
    monkeypatch.setenv("AWESOME_PROJECTS_PROJECTS_SECTION", "## Projects")
    monkeypatch.setenv("AWESOME_PROJECTS_ALLOW_REENTRY", "true")

    settings = Settings()

    assert settings.input_path == "docs/README.md"
    assert settings.projects_section == "## Projects"
    assert settings.allow_reentry is True
