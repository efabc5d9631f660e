# pytest_plugins = [
#     "swarmconsole.tests.fixtures_handlers",
#     "swarmconsole.tests.fixtures_clients",
# ]

from swarmconsole.tests.fixtures_clients import *  # noqa
from swarmconsole.tests.fixtures_handlers import *  # noqa
