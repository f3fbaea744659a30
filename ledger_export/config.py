"""
Read/write the export configuration file.
"""


from atomicwrites import atomic_write
from typing import NamedTuple
import json
import os
from ledger_export.errors import ConfigurationError


CONFIG_FILENAME = 'ledger-export.json'


class ExportConfig(NamedTuple):
    fiscal_start_month: int = 1
    app_name: str = 'Cover'
    date_format: str = '%Y-%m-%d'
    expense_account: str = ''

    def validate(self):
        """
        Raises:
            ConfigurationError
        """
        month = self.fiscal_start_month
        if isinstance(month, bool) or not isinstance(month, int) \
                or not 1 <= month <= 12:
            raise ConfigurationError(
                'fiscal_start_month must be 1-12, got {!r}'.format(month))
        if not isinstance(self.app_name, str) or self.app_name.strip() == '':
            raise ConfigurationError('app_name must not be empty')
        if not isinstance(self.date_format, str) or self.date_format.strip() == '':
            raise ConfigurationError('date_format must not be empty')
        if not isinstance(self.expense_account, str):
            raise ConfigurationError('expense_account must be a string')
        return self


def from_dict(data):
    """
    Build a validated config from a mapping, using defaults for missing keys.

    Raises:
        ConfigurationError
    """
    if not isinstance(data, dict):
        raise ConfigurationError('config must be a JSON object')
    unknown = set(data) - set(ExportConfig._fields)
    if unknown:
        raise ConfigurationError(
            'unknown config keys: ' + ', '.join(sorted(unknown)))
    return ExportConfig(**data).validate()


class ConfigFile:
    def __init__(self, root, filename=CONFIG_FILENAME):
        self.path = os.path.join(root, filename)

    def exists(self):
        return os.path.exists(self.path)

    def write_default(self):
        with atomic_write(self.path, mode='w', overwrite=False) as f:
            json.dump(ExportConfig()._asdict(), f, indent=2)
            f.write('\n')

    def read(self):
        """
        Raises:
            ConfigurationError
        """
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                'cannot read {}: {}'.format(self.path, e)) from e
        return from_dict(data)


def load(path=None):
    """Read the config file at path, or the defaults when path is None."""
    if path is None:
        return ExportConfig()
    if os.path.isdir(path):
        return ConfigFile(path).read()
    root, filename = os.path.split(os.path.abspath(path))
    return ConfigFile(root, filename).read()
