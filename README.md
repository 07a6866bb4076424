# fashionpong

A Pong game for one player against the computer. While you play, fashion-themed
power-ups appear on the field.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
fashionpong
```

This opens a 1280×800 window that shows the main menu. The game runs at up to
144 frames per second. To stop, close the window or press **ESC**.

### Main menu

- **UP** and **DOWN** move through *Start Game*, *Settings* and *Quit*. The
  cursor wraps around at both ends.
- **ENTER** on *Start Game* starts a match. The ball goes back to the centre and
  the power-ups are cleared. The score is not reset.

### In a match

- **UP** and **DOWN** move your paddle, which is the one on the right.
- The computer moves the paddle on the left so that it follows the ball's
  height.
- You score when the ball reaches the left edge. The computer scores when the
  ball reaches the right edge. After each point the ball restarts from the
  centre in a random diagonal direction.
- The computer's score is shown on the left half of the field and your score
  on the right.

### Power-ups

A new power-up appears every 8 seconds, somewhere in the middle part of the
field. It disappears if nobody collects it within 15 seconds.

When the ball touches a power-up, the power-up is collected. Items that affect
the ball act on the ball whichever side collected them. Every other item goes to
the paddle that the ball is horizontally closer to. An effect lasts 10 seconds.

| Item     | Effect                                                             |
|----------|--------------------------------------------------------------------|
| Shoe     | The ball's speed is multiplied by 1.3. The new speed is kept after the effect ends |
| Jacket   | The paddle becomes 40 pixels longer                                |
| Dress    | The paddle moves 1.5 times as fast                                 |
| Necklace | The ball becomes 1.5 times as large and turns yellow               |
| Hat      | The paddle gets a shield, which is used up the next time the ball hits it |
| Bag      | The paddle is marked with the power-up's colour only               |

A paddle that holds a power-up changes colour and glows. A bar above the paddle
shows how much time the power-up has left. A legend in the bottom-left corner
lists the items, and a counter in the bottom-right corner shows how many
power-ups are on the field.

## What the game does not have

- *Settings* and *Quit* in the main menu do nothing when you select them.
- There is no pause screen and no game-over screen. A match runs until you close
  the window.
- **ESC** closes the game, even though the field shows "ESC - Main Menu".
- The Bag does not double any points.
- The score is kept only while the window is open. Nothing is saved.

## Using the package in code

`fashionpong.game.Game` holds the whole game. You can drive it one frame at a
time without opening a window:

```python
from fashionpong.game import Game
from fashionpong.menu import MenuOption

game = Game()
assert game.handle_main_menu(False, False, True) is MenuOption.START_GAME
game.update_gameplay(dt=1 / 144, now=0.0, up_held=False, down_held=False,
                     escape_pressed=False)
print(game.score.player, game.score.cpu)
```

If `update_gameplay` is called with `escape_pressed=True`, the game goes back
to the main-menu state. `Game` accepts a `random.Random` instance, so that
ball directions and power-up spawns can be repeated. `Game.draw` renders the
current screen onto any pygame surface. `fashionpong.game.main` opens the
window and runs the game.