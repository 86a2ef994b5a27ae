from .loader import ConfigError, load_ini_files, load_json_files
from .schema import KeySpec, make_choices_validator, validate_section
from .settings import Settings, load_settings

__all__ = [
	"ConfigError",
	"load_ini_files",
	"load_json_files",
	"KeySpec",
	"make_choices_validator",
	"validate_section",
	"Settings",
	"load_settings",
]
