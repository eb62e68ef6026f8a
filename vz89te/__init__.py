"""Protocol helpers and a transport-agnostic driver for the MiCS-VZ-89TE air quality sensor."""

__version__ = "0.1.0"
__all__ = ["protocol", "sensor"]