import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "hr_admin_portal.settings.production"

    if env in {"test", "testing"}:
        return "hr_admin_portal.settings.testing"

    return "hr_admin_portal.settings.development"
