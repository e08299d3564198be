from .sqlalchemy_guest_os_repository import SqlalchemyGuestOsRepository
