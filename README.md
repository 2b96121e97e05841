# asteroidfield

A top-down arcade shooter built on pygame. Asteroids fall from the top of the
screen. Your ship dodges them and shoots them down. Weapon pickups appear now
and then and give you a stronger gun for a short time.

## Installing

```
pip install .
```

This also installs `pygame`. For the tests:

```
pip install ".[test]"
pytest
```

## Playing

Start the game from the directory that holds the `assets/` folder:

```
asteroidfield
```

The command accepts only `--help`. It opens a 1600×1200 window and shows the
title screen.

The game loads its files from these paths, relative to the working directory:

- the font: `assets/fonts/jersey.ttf`
- images: `assets/images/` (`background.png`, `ship.png`, `asteroid.png`,
  `bullet.png`, `rifle.png`, `revolver.png`, `shotgun.png`,
  `rocket_launcher.png`, `flamethrower.png`)
- music and sounds: `assets/music/` (`soundtrack.mp3`, `shoot.mp3`,
  `destruction.mp3`, `explosion.mp3`, `death.mp3`)

The package does not include these files. When files are missing:

- A missing image is drawn as a grey circle.
- A missing background is left black.
- A missing music or sound file is skipped without a sound.
- The font is required. Without it, the title screen and the play screen stay
  empty. The game-over screen raises `FileNotFoundError`.

### Controls

- **SPACE** on the title screen starts a round.
- **W A S D** or the arrow keys move the ship. The ship slows down by itself
  and bounces off the edges of the window.
- The ship always faces the mouse pointer.
- **Left mouse button** or **SPACE** fires. Each press fires one shot or
  volley, as long as the weapon's cooldown has passed. To fire again, release
  the button and press it again.

Each asteroid you destroy is worth 10 points, and a new asteroid takes its
place. The field always holds at least 12 asteroids. If an asteroid touches
your ship, the death sound plays, the music stops and the game-over screen
appears. That screen shows your score and how many whole seconds you survived.

## Weapons

A pickup spawns at a random spot every 10 seconds. It bobs up and down and
disappears after 30 seconds if nobody collects it. Each rarity glows in its
own colour, and rarer pickups pulse faster. The spawn chances follow the
weights 45 / 30 / 15 / 7 / 3.

| Weapon          | Rarity    | Lasts | Behaviour                                              |
|-----------------|-----------|-------|--------------------------------------------------------|
| Rifle           | Common    | 8 s   | Fast bullets, practically no cooldown                  |
| Revolver        | Uncommon  | 10 s  | One shot per second; ship top speed ×1.5               |
| Shotgun         | Rare      | 6 s   | Five pellets over a 45° fan, strong recoil             |
| Rocket Launcher | Epic      | 10 s  | A hit sets off an explosion that destroys every asteroid within 400 pixels |
| Flamethrower    | Legendary | 8 s   | Three slow shots over a 25° fan                        |

The default gun fires one bullet at most every 0.2 seconds. When a special
weapon runs out, the ship switches back to the default gun.

## Using the pieces

The game logic can also be driven without a real window:

- `asteroidfield.weapons` holds the weapon tables:
  - `WeaponType` lists the weapons.
  - `get_weapon_stats` returns a weapon's stats.
  - `rarity_data` returns a weapon's rarity, glow colour and pulse intensity.
  - `random_weapon_type(rng)` makes a weighted pick.
  - `weapon_texture` and `weapon_display_name` give a weapon's file and display
    names.
- `asteroidfield.messages.MessageBus` is a publish/subscribe hub. Controllers
  and scenes exchange `Message` objects through it, keyed by `MessageType`.
- `asteroidfield.collision.check_collision(a, b)` tells whether two active
  actors' circles overlap.
- `asteroidfield.core.Core` accepts a ready-made surface as `window`. In that
  case it does not open a display. `Core.step(delta_time)` then updates and
  draws the active scene for one frame.
- `asteroidfield.ship.ShipController`, `asteroidfield.menu.MenuScene` and
  `asteroidfield.gameplay.GameplayScene` accept input callables in place of
  the keyboard and mouse. The scenes also accept a random source (`rng`) and
  a clock factory. This makes play reproducible in tests.

Progress messages go through the standard `logging` module under the
`asteroidfield` logger. They are not printed unless you configure logging.

## What it does not do

- The game-over screen has no way back to the title screen or to a new round.
  Close the window and start the command again. `Core.switch_to_menu` exists
  for code that drives `Core` itself.
- Scores are not saved between runs.
- The game has no pause and no settings screen.