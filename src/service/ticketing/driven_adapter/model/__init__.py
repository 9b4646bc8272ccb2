"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.ticketing.driven_adapter.model.booking_model import BookingModel
from src.service.ticketing.driven_adapter.model.show_model import ShowModel

__all__ = [
    'BookingModel',
    'ShowModel',
]
