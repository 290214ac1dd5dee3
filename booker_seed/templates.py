from datetime import date

from booker_seed.schemas.booking import BookingDates, BookingTemplate

DEFAULT_TEMPLATES: tuple[BookingTemplate, ...] = (
    BookingTemplate(
        firstname="Automation",
        lastname="User1",
        totalprice=100,
        depositpaid=True,
        bookingdates=BookingDates(checkin=date(2025, 1, 15), checkout=date(2025, 1, 20)),
        additionalneeds="Breakfast",
    ),
    BookingTemplate(
        firstname="Automation",
        lastname="User2",
        totalprice=250,
        depositpaid=False,
        bookingdates=BookingDates(checkin=date(2025, 2, 1), checkout=date(2025, 2, 10)),
        additionalneeds="Late checkout",
    ),
    BookingTemplate(
        firstname="Automation",
        lastname="User3",
        totalprice=500,
        depositpaid=True,
        bookingdates=BookingDates(checkin=date(2025, 3, 15), checkout=date(2025, 3, 25)),
        additionalneeds="Airport shuttle",
    ),
)
