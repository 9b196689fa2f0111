"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from idmlpdf.engine.config import RenderConfig


class Settings(BaseSettings):
    idmlpdf_env: str = "development"
    idmlpdf_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    singular_tolerance: float = 1e-12
    none_swatch: str = "Swatch/None"
    default_stroke_weight: float | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            singular_tolerance=self.singular_tolerance,
            none_swatch=self.none_swatch,
            default_stroke_weight=self.default_stroke_weight,
        )


settings = Settings()
