# src/dropfour/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Player = Literal[1, 2]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..cols-1
