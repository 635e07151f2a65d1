"""
Hard-constraint filter for listings.

Hard constraints are the seeker's non-negotiables. A listing failing
any declared constraint is dropped before scoring.
"""

from typing import Iterable

from loguru import logger

from src.matching.values import as_mapping, as_str_list, to_date, to_number

constraints_log = logger.bind(module="Constraints")


def match_budget(
    price: float | None,
    budget_min: float | None,
    budget_max: float | None,
) -> bool:
    """
    Match listing price against the seeker's budget range.

    Args:
        price: Monthly price, None = unknown
        budget_min: Minimum budget (inclusive), None = no limit
        budget_max: Maximum budget (inclusive), None = no limit

    Returns:
        True if price is within range
    """
    if price is None:
        return True  # No price info, don't filter

    if budget_min is not None and price < budget_min:
        return False
    if budget_max is not None and price > budget_max:
        return False
    return True


def passes_hard_constraints(listing: dict, constraints: dict) -> bool:
    """
    Check if a listing passes every declared hard constraint.

    Rules (unset or malformed constraints never exclude; a listing
    missing an allow-listed attribute is excluded):
    - Budget: budget_min <= price_monthly <= budget_max
    - Neighborhoods: listing neighborhood must be in the allow-list
    - Move-in: listing must be available on or before move_in_from
    - Room types: listing room type must be in the allow-list
    - Minimum stay: listing min_stay_months must not exceed min_stay

    Args:
        listing: Listing record
        constraints: Seeker's hard constraints

    Returns:
        True if listing passes all constraints
    """
    constraints = as_mapping(constraints)

    # Budget
    if not match_budget(
        to_number(listing.get("price_monthly")),
        to_number(constraints.get("budget_min")),
        to_number(constraints.get("budget_max")),
    ):
        return False

    # Neighborhood allow-list
    neighborhoods = as_str_list(constraints.get("neighborhoods"))
    if neighborhoods:
        if listing.get("neighborhood") not in neighborhoods:
            return False

    # Move-in readiness
    move_in_from = to_date(constraints.get("move_in_from"))
    if move_in_from is not None:
        available_from = to_date(listing.get("available_from"))
        if available_from is not None and available_from > move_in_from:
            return False

    # Room type allow-list
    room_types = as_str_list(constraints.get("room_types"))
    if room_types:
        if listing.get("room_type") not in room_types:
            return False

    # Minimum stay
    min_stay = to_number(constraints.get("min_stay"))
    if min_stay is not None:
        listing_min_stay = to_number(listing.get("min_stay_months"))
        if listing_min_stay is not None and listing_min_stay > min_stay:
            return False

    return True


def apply_hard_constraints(listings: Iterable[dict], constraints: dict) -> list[dict]:
    """
    Filter listings to those passing the seeker's hard constraints.

    Args:
        listings: Candidate listing records
        constraints: Seeker's hard constraints

    Returns:
        Passing listings, in input order
    """
    passed = []
    skipped = 0

    for listing in listings:
        if passes_hard_constraints(listing, constraints):
            passed.append(listing)
        else:
            skipped += 1

    constraints_log.debug(f"Hard constraints: {len(passed)} passed, {skipped} skipped")
    return passed
