"""
Configuration template written by `elbow-router init`
"""

MINIMAL_CONFIG_TEMPLATE = """# elbow-router configuration
version: 1
project: my-diagram
description: Elbow connector routing settings

grid:
  # Grid cell size in canvas units. Offsets smaller than one cell are
  # treated as already aligned (straight connector).
  cell_size: 20

search:
  # Optional limits for very long connectors (remove to search unbounded)
  # max_grid_distance: 500
  # max_expansions: 200000

render:
  corner_radius: 4
  stroke_width: 2
  stroke_color: "#1e1e1e"
  padding: 20

output:
  directory: ${ELBOW_OUTPUT_DIR:-routing_results}
  formats: [json, csv, svg]
  file_prefix: routes
"""
