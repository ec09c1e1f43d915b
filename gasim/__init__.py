"""
gasim - Grand Archive Sandbox Simulator

A tabletop sandbox for a physical trading-card game. Players build a
deck from the fetched card catalog, then move card instances between
zones by hand. The package provides:
- The zone-based card state engine
- Sessions that own the live game state
- A catalog client and deck builder
- An HTTP API for the browser front end
"""

__version__ = "0.1.0"
