"""
Pricing Engine - maps a rental request to a price
"""

from localrot.models import RentalType

FREE_HOURS = 5
HOURLY_RATE = 1
DAILY_RATE = 2
# Monthly passes only exist for one and two months
MONTHLY_TIERS = {1: 4.99, 2: 9.98}


def calculate_price(rental_type, amount) -> float:
    """
    Price for renting a game ``amount`` units of ``rental_type``.

    - hour: the first five hours are free, then 1 per hour
    - day: 2 per day
    - month: 4.99 for one month, 9.98 for two, anything else is free
    - any other type is free

    The result is rounded to two decimals.
    """
    if isinstance(rental_type, RentalType):
        rental_type = rental_type.value

    price = 0
    if rental_type == RentalType.HOUR.value and amount > FREE_HOURS:
        price = (amount - FREE_HOURS) * HOURLY_RATE
    elif rental_type == RentalType.DAY.value:
        price = amount * DAILY_RATE
    elif rental_type == RentalType.MONTH.value:
        # TODO: decide pricing for month amounts other than 1 and 2, they are free for now
        price = MONTHLY_TIERS.get(amount, 0)

    return round(float(price), 2)
