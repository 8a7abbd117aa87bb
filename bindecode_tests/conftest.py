import os

from bindecode.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['BINDECODE_CONFIG_YAML'] = os.environ.get('BINDECODE_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
