"""
Memory core Python package.

Turn-based card-matching game: players flip two cards per turn looking for
pairs, while a bomb eliminates whoever finds it and a jolly pays a bonus.
Modules:
- card.py: Card, CardKind
- grid.py: Grid, Coord
- player.py: Player
- game.py: Game, the turn state machine
- deal.py: seeded grid/roster/game construction
- play.py: match driver for input providers and views
- console.py, cli.py: terminal front end
"""
