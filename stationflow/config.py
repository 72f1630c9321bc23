# stationflow/config.py

MINUTES_PER_DAY = 1440

# "within one hour of the selected time"
WINDOW_HALF_WIDTH = 60

# circle radius (px) for the traffic markers
UNFILTERED_RADIUS_RANGE = (0.0, 25.0)
FILTERED_RADIUS_RANGE = (3.0, 50.0)

# arrival-dominated, balanced, departure-dominated
FLOW_LEVELS = (0.0, 0.5, 1.0)

DEPARTURE_COLOR = "#4682b4"  # steelblue
ARRIVAL_COLOR = "#ff8c00"  # darkorange

# slider value meaning "any time"
ANY_TIME = -1
ANY_TIME_LABEL = "(any time)"

# ---- map ----
CENTER_LAT = 42.36027
CENTER_LON = -71.09415
ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18

BIKE_LANE_SOURCES = {
    "Boston bike lanes": (
        "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
        "boston::existing-bike-network-2022.geojson"
    ),
    "Cambridge bike lanes": (
        "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/"
        "Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson"
    ),
}
BIKE_LANE_COLOR = "#32D400"
