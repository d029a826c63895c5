# backend/modules/forms/config/forms_config.py

from pydantic_settings import BaseSettings


class FormsConfig(BaseSettings):
    """
    Configuration for form submission processing.

    Scoring weights, keyword tables and storage bounds are fixed constants
    and are not read from the environment.
    """

    # Run the heuristic scorer on accepted submissions
    SCORING_ENABLED: bool = True

    # Emit a warning when a schema uses a field kind the validator does not know
    LOG_UNKNOWN_FIELD_KINDS: bool = True

    # Log score components at debug level for each scored submission
    LOG_SCORE_DETAILS: bool = False

    class Config:
        env_prefix = "FORMS_"
        case_sensitive = False


# Global instance
forms_config = FormsConfig()


def get_forms_config() -> FormsConfig:
    """Get the forms processing configuration."""
    return forms_config
