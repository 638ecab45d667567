from .settings import (
    AppSettings,
    CompanyInfo,
    DEFAULT_FONT_BOLD,
    DEFAULT_FONT_REGULAR,
    FontConfig,
    MAX_FILE_SIZE_MB,
    OUTPUT_ROOT,
    PDF_MIME_TYPE,
    PageGeometry,
    TableStyle,
    load_settings,
)

__all__ = [
    "AppSettings",
    "CompanyInfo",
    "DEFAULT_FONT_BOLD",
    "DEFAULT_FONT_REGULAR",
    "FontConfig",
    "MAX_FILE_SIZE_MB",
    "OUTPUT_ROOT",
    "PDF_MIME_TYPE",
    "PageGeometry",
    "TableStyle",
    "load_settings",
]
