"""Static reference data.

Catalogs that don't change with API calls: the preset locations shown as
globe markers and the satellites drawn in orbit.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from earthwatch.reference.locations import LOCATIONS as LOCATIONS
from earthwatch.reference.locations import find_location as find_location
from earthwatch.reference.satellites import ISS as ISS
from earthwatch.reference.satellites import SATELLITES as SATELLITES
from earthwatch.reference.satellites import Satellite as Satellite
