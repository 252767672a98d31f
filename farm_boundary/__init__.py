"""Farm Boundary Measurement.

Turns drawn or imported hobby-farm boundaries into real-world
measurements (acres, feet) and converts them to and from the GeoJSON
``Polygon`` interchange format stored by the project layer.
"""

__version__ = "0.1.0"
