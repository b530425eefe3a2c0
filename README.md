# armyduel

A small console strategy game. You lead an army of the living: knights,
archers, infantry, healers and wizards under paladins, blade dancers and
undead hunters. You fight a bot that raises skeletons, ghosts, ghouls,
revenants and necromancers under liches and lords of terror. The first side
to reach three points wins the match.

## Installing

```
pip install .
```

## Playing

```
armyduel
```

The command takes no options apart from `--help`. The main menu offers a new
game, loading a saved game, the instructions, and exit.

1. Pick up to 5 commanders. Commanders cost nothing.
2. Spend your gold on up to 10 units. You start with 2000 gold.
3. Choose who goes into the next battle:
   - `SELECT BOSS <commander>` selects one commander of that kind, for example
     `select boss paladin`.
   - `SELECT <unit> <count>` selects up to that many units of a kind, for
     example `select knight 2`.
   - `SHOW` lists the selected forces and the whole army.
   - `START` begins the battle.
   Commands are not case sensitive.
4. The battle runs in rounds until one side's selected forces are all dead.
   The winner gets a point. Units summoned during the battle vanish. Dead
   units and commanders leave the army. Both sides get 1000 gold.

Between battles you can continue (buy more units and select again), save the
game, look at both armies, restart, or exit. A save asks for a name and writes
`<name>_p1.txt` and `<name>_bot.txt`. Loading reads the same two files.

## Using it as a library

The game's parts can be driven directly:

```python
from armyduel.player import Player
from armyduel.units import Knight, Paladin, Skeleton, Lich
from armyduel.recruiting import (
    try_add_unit, try_add_commander, try_select_units, try_add_selected_commander,
)
from armyduel.battle import start_battle

player, bot = Player(), Player()
try_add_unit(player, Knight)
try_add_commander(player, Paladin)
try_select_units(player, Knight, 1)
try_add_selected_commander(player, Paladin)

try_add_unit(bot, Skeleton)
try_add_commander(bot, Lich)
try_select_units(bot, Skeleton, 1)
try_add_selected_commander(bot, Lich)

start_battle(player, bot)
print(player.points, bot.points)
```

- `armyduel.units` holds every unit and commander class, built on `Unit` and
  `Commander`.
- `armyduel.army.Army` keeps a roster and the forces selected for battle. It
  raises `ArmyFullError` when a roster is full.
- `armyduel.player.Player` holds gold, points and an army. `spend_gold` raises
  `NotEnoughGoldError`. `save` and `load` write and read a text file.
- `armyduel.recruiting` buys, recruits and selects by class.
- `armyduel.battle` runs a duel.
- `armyduel.bot.BotArmyBuilder` assembles the opponent at random. It takes an
  optional `random.Random` so that results can be reproduced.
- `armyduel.menu.Console` and `armyduel.game.Game` take optional streams and
  generators, so a whole game can be scripted.

## Limits

- A saved game keeps only gold, points and commanders, with their health, mana
  and armor. Regular units are not saved, so after loading you rebuild them.
  Loaded commanders are added to those already in the army.
- There is one opponent, the bot. There is no play between two people.

## Tests

```
pip install .[test]
pytest
```