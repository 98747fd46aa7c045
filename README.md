# robotsiege

The rules, state and geometry of a small 3D arcade shooter. A defensive cannon
sits in front of the camera. Robots walk around the field and fire projectiles
at the cannon. The player turns the cannon with the mouse and shoots the robots
down before they hit it.

When every robot is destroyed, the next level begins. It has one more robot,
the robots move faster and they fire more often. A single hit disables the
cannon. The cannon then fades to black, the game is over, and pressing `r`
starts again.

The package uses only the standard library.

## Installation

```
pip install .
```

## Using the package

`robotsiege.world.Game` holds the whole world. You advance it by calling its
update methods from your own loop, and you feed it input with
`handle_mouse_motion` and `key_pressed`:

```python
import random

from robotsiege.world import Game

game = Game(random.Random(42))
game.handle_mouse_motion(400, 300)
game.key_pressed(" ")              # fire the cannon
for _ in range(100):
    game.move_robots()
    game.walk.step(game.robot_count)
    game.spin_cannon()
    game.fire_random_enemy_projectiles()
    game.update_defensive_projectiles()
    if game.update_enemy_projectiles() or game.fading:
        game.update_cannon_fade()
print(game.score, game.cannon_disabled, game.game_disabled)
```

Passing a seeded `random.Random` makes a run repeatable. Any object with a
`randrange(stop)` method will do.

### Modules

- `robotsiege.vector`: `Vector3`, an immutable 3D vector with `cross`, `dot`,
  `length`, `normalized` and arithmetic operators, and the functions `cross`
  and `normalize`. Normalizing the zero vector, or dividing by zero, gives the
  zero vector.
- `robotsiege.mesh`: `QuadMesh`, a square grid of quads spanned by two
  direction vectors, with per-vertex normals from `compute_normals`. It also
  holds a `Material`, which you set with `set_material`. `init_mesh` raises
  `ValueError` when the grid size is outside `max_mesh_dimensions()`.
- `robotsiege.world`:
  - `Game`: levels, score, the camera and the cannon, robots, and enemy and
    defensive projectiles.
  - `Robot`, `Projectile`, and `WalkCycle` (the leg joint angles).
  - `camera_direction`, `cannon_world_position` and `laser_hits_robot`.
- `robotsiege.textures`: procedural RGB images as `TextureImage`, each with
  `width`, `height`, packed `pixels` bytes and a `pixel(x, y)` accessor. The
  functions are `enemy_robot_texture` (512×512 panelling with noise),
  `metallic_texture` (a 64×64 diagonal ramp) and `dark_gray_texture`
  (64×64 dark noise).

## What this package does not do

It has no window, no drawing code and no command to start a game. It gives you
the game state, the geometry of the ground mesh and the texture pixels. Showing
them on screen and running the timing loop are up to the program that uses it.

## Tests

```
pip install ".[test]"
pytest
```