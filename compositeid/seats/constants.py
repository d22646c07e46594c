# SEATS identifier constants
# Based on H-Store SEATSConstants.java / FlightId.java / CustomerId.java

# Time units
MILLISECONDS_PER_MINUTE = 60 * 1000
MILLISECONDS_PER_HOUR = 60 * MILLISECONDS_PER_MINUTE  # 3,600,000
MILLISECONDS_PER_DAY = 24 * MILLISECONDS_PER_HOUR

# Flight configuration
FLIGHTS_DAYS_PAST = 1

# Composite id layouts (high to low significance)
# !!! persisted ids depend on these; never reorder or resize !!!
FLIGHT_ID_BITS = (
    16,  # AIRLINE_ID
    16,  # DEPART AIRPORT_ID
    16,  # ARRIVE AIRPORT_ID
    16,  # DEPART DATE (hours since benchmark start)
)

CUSTOMER_ID_BITS = (
    48,  # ID (per-airport customer sequence)
    16,  # DEPART AIRPORT_ID
)
