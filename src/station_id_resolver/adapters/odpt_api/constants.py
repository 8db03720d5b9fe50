"""Constants for the ODPT catalog adapter.

API Documentation: https://developer.odpt.org/documents
Requires a consumer key (acl:consumerKey query parameter).
"""

STATION_RESOURCE = "/odpt:Station"

# Query parameter and response field names
CONSUMER_KEY_PARAM = "acl:consumerKey"
RAILWAY_PARAM = "odpt:railway"
TITLE_PARAM = "dc:title"
SAME_AS_FIELD = "owl:sameAs"
TITLE_FIELD = "dc:title"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
