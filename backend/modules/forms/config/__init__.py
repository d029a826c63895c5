# backend/modules/forms/config/__init__.py

from .forms_config import FormsConfig, get_forms_config

__all__ = ["FormsConfig", "get_forms_config"]
