from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Generation provenance stamped onto CAD artifacts
    GENERATOR_NAME: str = "archgen"
    GENERATOR_SOFTWARE: str = "ArchGen CAD Generator"
    GENERATOR_VERSION: str = "1.0.0"
    FLOOR_PLAN_CONFIDENCE: float = 0.88
    MODEL_3D_CONFIDENCE: float = 0.85

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
