import os


def get_settings_module() -> str:
    # APP_SETTINGS_MODULE trỏ thẳng tới module cấu hình (ví dụ: config.local)
    explicit = os.getenv("APP_SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit

    # Nếu không, APP_ENV chọn module, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()
    if env in {"prod", "production"}:
        return "config.production"
    if env in {"test", "testing"}:
        return "config.testing"
    return "config.development"
