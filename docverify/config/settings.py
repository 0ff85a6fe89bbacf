from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_upload_bytes: int = 50 * 1024 * 1024
    land_max_upload_bytes: int = 10 * 1024 * 1024
    pdf_engine: str = "ocr"
    word_engine: str = "ocr"
    ocr_language: str = "eng"
    tesseract_cmd: str = ""
    ocr_pdf_dpi: int = 300
    extraction_max_workers: int = 4

    section_analysis_policy: str = "synthesis"
    section_text_limit: int = 2000
    synthesis_success_ratio: float = 0.7
    synthesis_seed: int | None = None
    synthesis_success_confidences: list[int] = [85, 88, 90, 92, 95]
    synthesis_issue_confidences: list[int] = [25, 30, 35, 40, 45]

    generation_provider: str = ""
    generation_api_key: str = ""
    generation_model_name: str = ""
    generation_base_url: str = ""
    generation_timeout_seconds: int = 30
    generation_max_tokens: int = 500
    generation_temperature: float = 0.3
    generation_top_p: float = 0.9
    generation_rate_limit_delay_seconds: float = 0.0

    registry_provider: str = "example"
    registry_base_url: str = "https://eservices.tn.gov.in"
    registry_timeout_seconds: int = 30
    registry_rate_limit_delay_seconds: float = 2.0
    government_survey_numbers: list[str] = ["SF No. 999/1", "SF No. 888/2"]

    history_backend: str = "memory"
    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "docverify"
    db_username: str = "docverify"
    db_password: str = "secret"
    db_pool_max_size: int = 4

    report_output_dir: str = "reports"
