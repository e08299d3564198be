from .guest_os import GuestOsType
