from .booking import NO_ROOM_AVAILABLE as NO_ROOM_AVAILABLE
from .booking import Booking as Booking
from .room import Room as Room
