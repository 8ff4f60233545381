from .booking_repository import BookingRepository as BookingRepository
from .room_repository import RoomRepository as RoomRepository
