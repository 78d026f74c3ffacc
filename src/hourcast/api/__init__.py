"""
API package for the hourcast application.
Contains clients for the address geocoder and the forecast grid service.
"""

from .base_api import BaseAPI
from .census_geocoder import CensusGeocoderAPI
from .nws import NWSGridAPI

__all__ = ['BaseAPI', 'CensusGeocoderAPI', 'NWSGridAPI']
