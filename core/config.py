from pydantic_settings import BaseSettings, SettingsConfigDict

from src.gtfs_clean_bc.agency.domain.entities.agency_profile import AGENCY_PROFILES


class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False  # Default to False for security
    LOG_LEVEL: str = "INFO"

    # Agency whose feed is cleaned (see AGENCY_PROFILES)
    AGENCY_CODE: str = "rtc_quebec"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def validate_production_settings(self) -> None:
        """Validate critical settings for production environment.

        Call this during application startup.
        Raises ValueError if production settings are invalid.
        """
        errors = []

        if self.is_production:
            # Check DEBUG is disabled
            if self.DEBUG:
                errors.append("DEBUG must be False in production")

        if self.AGENCY_CODE not in AGENCY_PROFILES:
            errors.append(
                f"AGENCY_CODE '{self.AGENCY_CODE}' is not one of: {', '.join(sorted(AGENCY_PROFILES))}"
            )

        if errors:
            raise ValueError(
                "Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
            )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Create settings instance
settings = Settings()
settings.validate_production_settings()
