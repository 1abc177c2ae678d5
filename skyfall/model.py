from dataclasses import dataclass, field
from typing import List, Tuple

from .entity import Entity, make_balloon
from .fps import FpsCounter


@dataclass
class Model:
    hover_pos: Tuple[int, int] = (0, 0)
    entities: List[Entity] = field(default_factory=list)
    hover_entity: Entity = field(default_factory=lambda: make_balloon(0.0, 0.0))
    fps_counter: FpsCounter = field(default_factory=FpsCounter)
