import logging
import os

# Display precision (decimal places) per calculator
SCALING_PRECISION = 4
CONVERSION_PRECISION = 4
RTD_PRECISION = 2

LOG_LEVEL_ENV = "CALC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(level: str = None) -> None:
    """Sets up root logging for the front ends. CALC_LOG_LEVEL overrides the default WARNING."""
    name = (level or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING), format=LOG_FORMAT)
