"""Immediate-mode terminal toy: balloons and bricks on a braille canvas."""

__version__ = "0.1.0"

from .app import App
from .channel import Receiver, Sender, channel
from .config import Config
from .entity import Balloon, Brick, Circle, Entity, Rectangle
from .messages import Command, Message, MouseHoverPos, MouseLeftClick, Quit, Render, Tick
from .model import Model
from .update import update
