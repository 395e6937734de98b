"""Circle-approximation hit tests between the ship and falling entities."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..entities import Meteor, Ship, Star
from ..utils.math_utils import distance


def meteor_hits_ship(ship: Ship, meteor: Meteor, hitbox_scale: float) -> bool:
    """Return True when ``meteor`` is close enough to destroy the ship.

    The contact distance is the sum of both radii shrunk by ``hitbox_scale``.
    Touching exactly at the threshold does not count.
    """
    ship_x, ship_y = ship.center
    meteor_x, meteor_y = meteor.center
    threshold = (ship.radius + meteor.radius) * hitbox_scale
    return distance(ship_x, ship_y, meteor_x, meteor_y) < threshold


def star_touches_ship(ship: Ship, star: Star) -> bool:
    ship_x, ship_y = ship.center
    star_x, star_y = star.center
    return distance(ship_x, ship_y, star_x, star_y) < ship.radius + star.radius


def find_fatal_meteor(ship: Ship, meteors: Iterable[Meteor], hitbox_scale: float) -> Optional[Meteor]:
    for meteor in meteors:
        if meteor_hits_ship(ship, meteor, hitbox_scale):
            return meteor
    return None


def touching_stars(ship: Ship, stars: Iterable[Star]) -> List[Star]:
    return [star for star in stars if star_touches_ship(ship, star)]
