"""Constants for the HeartRails Express adapter.

API Documentation: http://express.heartrails.com/api.html
No authentication required.
"""

# GET <base>/station?method=getStations&name=... or &x=<lon>&y=<lat>
STATION_PATH = "/station"
GET_STATIONS_METHOD = "getStations"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
