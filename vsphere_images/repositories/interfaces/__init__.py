from .inventory import IInventoryRepository
from .guest_os import IGuestOsRepository
