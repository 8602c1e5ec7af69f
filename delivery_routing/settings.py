import os
import sys
import logging

from delivery_routing.core.constants import DEFAULT_DEPOT_NAME, DEFAULT_MAX_GRAPH_LOCATIONS
from delivery_routing.utils.env_loader import load_env_from_file

logger = logging.getLogger(__name__)

# Try different possible locations for the env file
env_paths = [
    os.path.join(os.path.dirname(__file__), 'env_var.env'),  # App directory
    os.path.join(os.path.dirname(os.path.dirname(__file__)), 'env_var.env'),  # Root directory
]

for path in env_paths:
    if load_env_from_file(path, override=False):
        break

# Determine if we're in test mode
TESTING = 'test' in sys.argv or 'pytest' in sys.modules

# Location every delivery agent starts from
DEFAULT_DEPOT = os.getenv('DELIVERY_DEPOT_NAME', DEFAULT_DEPOT_NAME).strip() or DEFAULT_DEPOT_NAME

try:
    MAX_GRAPH_LOCATIONS = int(os.getenv('DELIVERY_MAX_GRAPH_LOCATIONS', DEFAULT_MAX_GRAPH_LOCATIONS))
except ValueError:
    logger.warning("DELIVERY_MAX_GRAPH_LOCATIONS is not an integer; using the default")
    MAX_GRAPH_LOCATIONS = DEFAULT_MAX_GRAPH_LOCATIONS
