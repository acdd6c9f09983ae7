from .user import User
from .property import Property
from .reservation import Reservation
from .property_review import PropertyReview
