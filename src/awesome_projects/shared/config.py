from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    input_path: str = "README.md"
    tmp_dir: str = "tmp"
    parsed_projects_file: str = "parsed_projects.txt"
    projects_section: str = "## 🚀 Projects"
    allow_reentry: bool = False
    log_level: str = "INFO"

    model_config = {"env_prefix": "AWESOME_PROJECTS_"}
