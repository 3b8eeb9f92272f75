"""
Contract Generator

Creates player contracts:
- Market-value veteran deals (free agency, depth signings)
- One-year minimum deals
- Four-year rookie-scale deals for drafted players
- Mid-deal contracts for a freshly generated league, so expirations are
  staggered from the first offseason on
"""

import logging
import random
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from config.simulation_settings import DEFAULT_SETTINGS
from league_state.contract_models import Contract
from league_state.player_models import Player
from player_generation.player_generator import new_entity_id
from salary_cap.cap_calculator import CapCalculator
from salary_cap.market_value_calculator import MarketValueCalculator
from salary_cap.rookie_scale import ROOKIE_CONTRACT_YEARS, RookieScaleCalculator


logger = logging.getLogger(__name__)

# Players with this much experience or less start on their rookie deal
ROOKIE_DEAL_MAX_EXPERIENCE = ROOKIE_CONTRACT_YEARS - 1
ANNUAL_RAISE = 0.05
TOTAL_DRAFT_PICKS = 224


class ContractGenerator:
    """
    Generates contracts scaled to the league salary cap.

    Usage:
        generator = ContractGenerator(rng, salary_cap=255_400_000)
        contracts, players = generator.generate_roster_contracts(roster, team_id=7, year=2026)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        salary_cap: int = DEFAULT_SETTINGS.salary_cap,
        market_value_calculator: Optional[MarketValueCalculator] = None,
        rookie_scale: Optional[RookieScaleCalculator] = None
    ):
        self.rng = rng or random.Random()
        self.salary_cap = salary_cap
        self.market = market_value_calculator or MarketValueCalculator(salary_cap)
        self.rookie_scale = rookie_scale or RookieScaleCalculator(salary_cap)
        self.cap_calculator = CapCalculator(salary_cap)

    def generate_contract(self, player: Player, team_id: int, year: int) -> Contract:
        """
        Market-value contract starting in the given league year.

        Args:
            player: Player being signed
            team_id: Signing team
            year: First season the contract covers
        """
        value = self.market.calculate_player_value(
            player.position, player.overall, player.age, player.experience
        )
        return self._build_contract(
            player_id=player.player_id,
            team_id=team_id,
            year=year,
            years=value['years'],
            total_value=value['total_value'],
            signing_bonus=value['signing_bonus'],
            guaranteed_money=value['guaranteed'],
        )

    def generate_minimum_contract(self, player: Player, team_id: int, year: int) -> Contract:
        """One-year league-minimum deal."""
        salary = self.minimum_salary(player)
        return Contract(
            contract_id=new_entity_id(self.rng, "contract"),
            player_id=player.player_id,
            team_id=team_id,
            signed_year=year,
            total_years=1,
            annual_cap_hits=(salary,),
        )

    def minimum_salary(self, player: Player) -> int:
        return self.market.minimum_salary(player.experience)

    def generate_rookie_contract(
        self,
        player_id: str,
        team_id: int,
        year: int,
        overall_pick: int
    ) -> Contract:
        """Four-year rookie-scale contract for a draft slot."""
        values = self.rookie_scale.calculate_contract(overall_pick)
        return Contract(
            contract_id=new_entity_id(self.rng, "contract"),
            player_id=player_id,
            team_id=team_id,
            signed_year=year,
            total_years=ROOKIE_CONTRACT_YEARS,
            annual_cap_hits=values.annual_cap_hits,
            signing_bonus=values.signing_bonus,
            guaranteed_money=values.guaranteed_money,
            is_rookie_contract=True,
        )

    def generate_roster_contracts(
        self,
        roster: Iterable[Player],
        team_id: int,
        year: int
    ) -> Tuple[List[Contract], List[Player]]:
        """
        Contracts for an entire generated roster.

        Returns:
            (contracts, updated_players) where each player carries its new
            contract_id and team_id
        """
        contracts = []
        players = []
        for player in roster:
            contract = self.generate_initial_contract(player, team_id, year)
            contracts.append(contract)
            players.append(replace(player, team_id=team_id, contract_id=contract.contract_id))

        logger.debug(f"Generated {len(contracts)} contracts for team {team_id}")
        return contracts, players

    def generate_initial_contract(self, player: Player, team_id: int, year: int) -> Contract:
        """
        Contract already in progress at the given year.

        Young players sit on rookie deals signed when they entered the
        league; veterans are somewhere inside a market-value deal.
        """
        if player.experience <= ROOKIE_DEAL_MAX_EXPERIENCE:
            years_into = player.experience
            contract = self.generate_rookie_contract(
                player.player_id, team_id, year - years_into, self._estimate_draft_slot(player)
            )
        else:
            contract = self.generate_contract(player, team_id, year)
            years_into = self.rng.randint(0, contract.total_years - 1)
            contract = replace(contract, signed_year=year - years_into)

        return replace(contract, current_year=years_into + 1)

    def _estimate_draft_slot(self, player: Player) -> int:
        # Better players were drafted earlier
        slot = (95 - player.overall) * 5 + self.rng.randint(-10, 10)
        return max(1, min(TOTAL_DRAFT_PICKS, slot))

    def _build_contract(
        self,
        player_id: str,
        team_id: int,
        year: int,
        years: int,
        total_value: int,
        signing_bonus: int,
        guaranteed_money: int
    ) -> Contract:
        proration = self.cap_calculator.calculate_signing_bonus_proration(signing_bonus, years)
        proration_years = min(years, CapCalculator.MAX_PRORATION_YEARS)

        # Base salaries escalate each year
        weights = [(1 + ANNUAL_RAISE) ** i for i in range(years)]
        base_total = max(0, total_value - signing_bonus)
        base_salaries = [int(base_total * w / sum(weights)) for w in weights]

        cap_hits = tuple(
            salary + (proration if index < proration_years else 0)
            for index, salary in enumerate(base_salaries)
        )
        return Contract(
            contract_id=new_entity_id(self.rng, "contract"),
            player_id=player_id,
            team_id=team_id,
            signed_year=year,
            total_years=years,
            annual_cap_hits=cap_hits,
            signing_bonus=signing_bonus,
            guaranteed_money=guaranteed_money,
        )
