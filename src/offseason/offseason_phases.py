"""
Offseason Stage Enumeration

Defines the automated offseason stages run between the Super Bowl and the
next regular season, in the order they execute.
"""

from enum import Enum


class OffseasonStage(Enum):
    """
    Automated offseason stages.

    Declaration order is execution order; later stages depend on the
    roster and contract changes of earlier ones.
    """

    PROGRESSION = "progression"
    """
    Player development.

    - Every player (rostered and free agent) ages one year
    - Experience increases by one season
    - Young players grow toward potential, veterans decline
    """

    RETIREMENT = "retirement"
    """
    Player retirements.

    - Nobody under 28 retires
    - Chance rises with age, adjusted by position and role value
    - Retired players leave every roster, contract and pool
    """

    CONTRACT_EXPIRATION = "contract_expiration"
    """
    Contract year rollover.

    - Every contract advances one year
    - Finished contracts are voided and the player becomes a free agent
    """

    COACHING_CHANGES = "coaching_changes"
    """
    Coaching staff turnover.

    - Losing teams may fire the head coach (coordinators may follow)
    - Expired coaching contracts are renewed or the coach is replaced
    """

    DRAFT = "draft"
    """
    AI draft.

    - 7 rounds in draft order, best available weighted by need
    - Drafted players sign 4-year rookie-scale contracts
    - Undrafted prospects enter the free agent pool
    """

    FREE_AGENCY = "free_agency"
    """
    AI free agency.

    - Best free agents first
    - Signed by the neediest team with cap room
    - One-year minimum deal when the market contract does not fit
    """

    ROSTER_MAINTENANCE = "roster_maintenance"
    """
    Final roster sizing.

    - Rosters over 53 keep their best players
    - Short rosters are filled with generated depth players
    """

    FINANCES = "finances"
    """
    Cap recalculation for the upcoming league year.
    """

    def __str__(self) -> str:
        """Return human-readable stage name."""
        return self.value.replace('_', ' ').title()

    @classmethod
    def get_display_name(cls, stage: 'OffseasonStage') -> str:
        """
        Get user-friendly display name for stage.

        Example:
            >>> OffseasonStage.get_display_name(OffseasonStage.CONTRACT_EXPIRATION)
            'Contract Expiration'
        """
        return str(stage)
