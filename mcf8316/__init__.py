"""I2C driver, CRC-8 framing and algorithm configuration register models for the MCF8316C-Q1."""

__version__ = "0.1.0"