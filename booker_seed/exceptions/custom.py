class SeedError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthError(SeedError):
    pass


class CreationError(SeedError):
    def __init__(self, message: str, guest_name: str, status_code: int | None = None):
        self.guest_name = guest_name
        super().__init__(message, status_code=status_code)


class BookingNotFoundError(SeedError):
    def __init__(self, booking_id: int):
        self.booking_id = booking_id
        super().__init__(f"Booking {booking_id} not found", status_code=404)


class NetworkError(SeedError):
    pass


class ArtifactError(SeedError):
    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)
