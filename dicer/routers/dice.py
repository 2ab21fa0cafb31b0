"""Dice rolling route: parse a notation string and roll it."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from dicer.config import settings
from dicer.dice import DiceRoller
from dicer.limits import check_limits
from dicer.parse import parse
from dicer.schemas import DiceRequest, DiceResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dice", response_model=DiceResponse)
async def roll_dice(req: DiceRequest) -> DiceResponse:
    """Roll the requested notation.

    A DiceError from parsing or the bounds check propagates to the
    handler in main.py, which answers 422.
    """
    logger.info("Received a request: %r", req.roll[:80])
    times, dice = parse(req.roll)
    check_limits(times, dice, settings)
    # One roller per request; rollers are not safe to share.
    roller = DiceRoller()
    return DiceResponse(roll=roller.roll_times(dice, times))
