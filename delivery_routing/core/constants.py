# Name of the location every delivery agent starts from
DEFAULT_DEPOT_NAME = "Depot"

# Upper bound on the number of locations accepted in a single API payload
DEFAULT_MAX_GRAPH_LOCATIONS = 500

# Separator used when rendering a path for display
PATH_DISPLAY_SEPARATOR = " -> "

# Shown in place of a distance when a segment has no route
UNAVAILABLE_DISTANCE_LABEL = "N/A"
