# copydash

copydash is a small side-scrolling arcade game with one level. Your
square stays near the left edge while spikes, blocks and a portal scroll
towards it. Jump over the spikes, land on the block staircases and reach
the portal at the end.

## Installing

    pip install .

This also installs `pygame`, which the game uses to open its window and
draw each frame.

## Playing

    copydash
    copydash --assets path/to/images

The game opens on a menu that shows the title and a pulsing play button.

| Input               | Effect                                           |
|---------------------|--------------------------------------------------|
| Space               | in the menu, restart the level and play; else jump |
| Up arrow            | jump                                             |
| Left click on Play  | leave the menu                                   |
| Esc or Q            | go back to the menu                              |

A jump key press stays buffered for two frames. If you press it just
before the square lands, the square jumps again as soon as it is back on
the ground.

If you touch a spike or run into the side of a block, the game holds the
frame for one second and then starts the level again from the beginning.
When the portal reaches the player, jumping stops working and the square
flies upwards. The game then returns to the menu and the level resets.

The `--assets` option sets the directory that holds the images. It
defaults to `assets` in the working directory. The images are `bg.png`,
`title.png`, `play.png`, `block.png`, `spike.png`, `player.jpg` and
`portal.png`. If an image cannot be loaded, its path is printed to
standard error and the game draws a plain coloured shape in its place.
For the background, that shape is the plain clear colour.

## Using it as a library

The game rules do not depend on a window, so you can drive them directly
through `copydash.game.Game`:

```python
from copydash.game import Game

game = Game()
game.press_key(" ")      # leave the menu and start the level
for _ in range(10):
    game.tick()          # advance one frame
game.jump()
print(game.player_y, game.level.portal_x)
```

`Game` takes a `pause` callable. The game calls it with a number of
seconds whenever it freezes, after a death or at the end of the level.
By default it does nothing. Other methods are `press_up()`,
`click(x, y)`, `resize(width, height)`, `reset(from_menu)` and
`play_button_scale()`.

The `copydash.level` module provides the following:

- `build_level()` returns a `Level` that holds the spikes (`Obstacle`), the blocks (`Block`) and the portal position.
- Each of these has a `reset()` method that puts it back where it started.
- Functions such as `player_vertices()` and `spike_vertices()` give the shapes of the objects as `(x, y, u, v)` vertices in normalised coordinates.

`copydash.app.Renderer` draws a `Game` onto any pygame surface.
`copydash.app.to_screen()` converts normalised coordinates to window
pixels.

## What it does not do

- There is only one built-in level, and you cannot load others.
- The game has no sound and no score.
- It does not save progress.