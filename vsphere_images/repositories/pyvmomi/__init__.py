from .pyvmomi_inventory_repository import PyvmomiInventoryRepository
from .session import ServiceInstanceProvider
