from .memory_guest_os_repository import InMemoryGuestOsRepository
