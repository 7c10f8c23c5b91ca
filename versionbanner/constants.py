"""
Constants for versionbanner.
"""

# Defaults used when a banner option is not supplied
DEFAULT_VERSION = "0.0.1 [DEFAULT]"
DEFAULT_COPYRIGHT_NAME = "Python Programmer <python@python.org> [DEFAULT]"
DEFAULT_LICENSE_URL = "https://github.com/<username_here>/ [DEFAULT]"
DEFAULT_CR_YEAR = "2021 [DEFAULT]"

RUNTIME_NAME = "Python"
REFERENCE_URL = "https://www.python.org/"

# URL schemes whose modification time cannot be read locally
REMOTE_SCHEMES = ("http:", "https:", "ftp:", "ftps:", "ws:", "wss:", "data:", "blob:")

BANNER_TEMPLATE = """
 Application '{filename}' is version '{version}'.
 Last modified on: {modified}
 Running {runtime} version '{runtime_version}' on '{os_name} [{arch} with {cpu_count} CPU cores]'.
 Copyright (c) {cr_year} {copyright_name}.

 For licenses and further information visit:
   - {license_url}
   - {reference_url}
   """

# Sample options shown by the ``demo`` command
DEMO_OPTIONS = {
    "version": "1.0.6",
    "copyright_name": "John Doe <example.com>",
    "license_url": "https://github.com/example/my_application/",
    "cr_year": "2022",
}

CONFIG_FILES = [
    '.versionbanner.yaml',
    '.versionbanner.yml',
    '.versionbanner.toml',
    '.versionbanner.json',
]

DEFAULT_CONFIG = {
    'banner': {
        'version': None,
        'copyright_name': None,
        'license_url': None,
        'cr_year': None,
    },
    'logging': {
        'level': 'INFO',
        'format': '%(message)s',
    },
}
