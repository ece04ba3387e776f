"""Age statistics over the stored clients."""
import statistics
from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from src.app.core.domain.models import AgeStatistics
from src.shared.exceptions import NoRecordsFound

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    return float(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def compute_age_statistics(ages: Sequence[int]) -> AgeStatistics:
    """
    Compute the mean and population standard deviation of a sequence of ages.

    Args:
        ages: Ages of every stored client

    Returns:
        AgeStatistics with both figures rounded to 2 decimal places

    Raises:
        NoRecordsFound: If there are no ages to aggregate
    """
    if not ages:
        raise NoRecordsFound("Client")

    mean = statistics.fmean(ages)
    # Population deviation: divide by the count, not count - 1
    std_dev = statistics.pstdev(ages, mu=mean)

    return AgeStatistics(mean_age=round_half_up(mean), std_dev=round_half_up(std_dev))
