"""Zone-aware calendar arithmetic on millisecond epoch instants.

Example
-------
>>> from epochal import Zone, end_of_month, to_iso8601_date_time
>>> nyc = Zone.iana("America/New_York")
>>> to_iso8601_date_time(nyc, end_of_month(nyc, 1520269200000))
'2018-03-31T23:59:59.999'
"""

from ._engine import *
from ._engine import __all__, __version__
