import os
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # pyright: ignore[reportMissingImports]


# Settings key constants
SETTING_DESTINATION = 'destination'
SETTING_LOGGING_PATH = 'logging.path'
SETTING_LOGGING_LEVEL = 'logging.level'

SETTINGS_ENVIRONMENT_VARIABLE = 'MATCHCOPY_SETTINGS'
DEFAULT_SETTINGS_FILE_NAME = 'matchcopy.toml'


class Settings:
    """Read-only access to a matchcopy settings file.

    Settings supply defaults for options the command line leaves out. The file is
    plain TOML, for example::

        destination = "renders/matched"

        [logging]
        path = "matchcopy.log"
        level = "WARNING"

    A missing file is not an error: every get() call then returns its default.

    Example:
        settings = Settings(Path('matchcopy.toml'))
        destination = settings.get(SETTING_DESTINATION)
        log_level = settings.get(SETTING_LOGGING_LEVEL, 'INFO')
    """

    def __init__(self, settings_file: Path | None):
        """Load settings from a TOML file.

        Args:
            settings_file: Path to the settings file, or None for empty settings

        Raises:
            tomllib.TOMLDecodeError: The file exists but is not valid TOML
        """
        self._settings_file = settings_file
        self._settings = {}

        if settings_file is not None and settings_file.is_file():
            with open(settings_file, 'rb') as f:
                self._settings = tomllib.load(f)

    @property
    def settings_file(self) -> Path | None:
        return self._settings_file

    def get(self, key: str, default=None):
        """Look up a setting, returning default when it is not set.

        Keys of the [logging] table are written as 'logging.path' and
        'logging.level'; 'destination' is a top-level key. A key whose
        table is missing, or is not a table, counts as not set.
        """
        value = self._settings
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value


def locate_settings_file(explicit_path: str | os.PathLike | None = None) -> Path | None:
    """Choose the settings file for this invocation.

    An explicit path wins, then the MATCHCOPY_SETTINGS environment variable, then
    matchcopy.toml in the working directory if it exists.
    """
    if explicit_path is not None:
        return Path(explicit_path)

    from_environment = os.environ.get(SETTINGS_ENVIRONMENT_VARIABLE)
    if from_environment:
        return Path(from_environment)

    candidate = Path.cwd() / DEFAULT_SETTINGS_FILE_NAME
    if candidate.is_file():
        return candidate

    return None
