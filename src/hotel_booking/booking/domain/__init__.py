from .entity import NO_ROOM_AVAILABLE as NO_ROOM_AVAILABLE
from .entity import Booking as Booking
from .entity import Room as Room
from .repository import BookingRepository as BookingRepository
from .repository import RoomRepository as RoomRepository
