"""Features shared by the route guide tests."""
from domain.route_guide import Feature, Point


LLAMA_FARM = Feature(location=Point(407838351, -746143763), name="Llama Farm")
WHIPPANY = Feature(location=Point(408122808, -743999179), name="101 New Jersey 10, Whippany, NJ 07981, USA")
SHOHOLA = Feature(location=Point(413628156, -749015468), name="U.S. 6, Shohola, PA 18458, USA")
KINGSTON = Feature(location=Point(419999544, -740371136), name="5 Conners Road, Kingston, NY 12401, USA")
FAR_AWAY = Feature(location=Point(-337000000, 1512000000), name="Sydney Harbour")
# Second entry at Whippany's location, kept as a distinct record
WHIPPANY_DUP = Feature(location=Point(408122808, -743999179), name="Whippany depot")

FEATURES = [LLAMA_FARM, WHIPPANY, SHOHOLA, KINGSTON, FAR_AWAY, WHIPPANY_DUP]
