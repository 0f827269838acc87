"""
Framework defaults
"""

# Template suffixes: the Jinja suffix is searched before the framework default
JINJA_TEMPLATE_EXTENSION = '.jinja'
DEFAULT_TEMPLATE_EXTENSION = '.html'

DEFAULT_ENCODING = 'UTF-8'
DEFAULT_LAYOUT = 'default'

# View directory names under each template path
LAYOUT_DIR = 'layout'
ELEMENT_DIR = 'element'
CELL_DIR = 'cell'
PLUGIN_DIR = 'plugin'

# Container binding holding the shared ViewEnvironment
VIEW_ENVIRONMENT_BINDING = 'view.environment'

# Config key for JinjaView options (environment, markdown)
JINJA_VIEW_CONFIG_KEY = 'view.JINJA_VIEW_CONFIG'

# Plugin whose presence (with debug on) enables render profiling
PROFILER_PLUGIN = 'DebugKit'

# Application namespace searched for cells by convention
DEFAULT_APP_NAMESPACE = 'app'

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 8000
