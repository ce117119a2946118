# bnmo

A small game console as a Python library. It keeps a list of games, a queue
of games to play, a history of what was played and a scoreboard for every
game, and it has a handful of text games to play.

Every game takes two callables: `ask(prompt) -> str` to read a line from the
player and `out(text)` to show text. That makes them easy to wire to a
terminal (`input` and `print`) or to drive from a script or a test. The games
that use chance also take an optional `random.Random`.

## Install

```
pip install .
```

## Session

`bnmo.session.Session` holds the state of one console session:

- `games` – the game library, in order
- `queue` – the games waiting to be played (a `deque`)
- `history` – the games played, oldest first
- `scoreboards` – for each game, a dict of player name to score

```python
from bnmo.session import Session, SessionError

session = Session()
session.load_config("config.txt")   # a count line, then one game name per line
session.create_game("CHESS")
session.enqueue_game(1)             # 1-based number in the game list
game = session.next_game()          # takes the front of the queue, adds it to history
session.record_score(game, "alice", 80)
print(session.render_scoreboards())
session.save("savefile.txt")
```

Methods:

- `load_config(path)`, `load_save(path)`, `save(path)`
- `create_game(name)` – fails if the name is already in the list
- `delete_game(number)` – the first five games cannot be deleted, nor a game
  that is in the queue
- `enqueue_game(number)`
- `skip_games(n)` – drops up to `n` games from the front of the queue;
  `n` must be between 1 and 100 and the queue must not be empty
- `next_game()`
- `recent_history(n)` – up to `n` played games, most recent first
- `reset_history()`
- `record_score(game, name, score)` – a name may appear once per scoreboard
- `has_player(game, name)`
- `reset_scoreboard(choice)` – `0` clears every scoreboard, `n` clears the
  scoreboard of game number `n`
- `render_scoreboards()`

Anything that cannot be done raises `SessionError`, whose message is meant to
be shown to the player. `parse_score_line(line)` splits a saved `name score`
line.

### Save file format

```
<number of games>
<game name>
...
<number of history entries>
<game name, newest first>
...
<number of scores for game 1>
<player> <score>
...
```

The scoreboards follow in the same order as the game list.

## Games

| Module              | Function                            | Returns                      |
|---------------------|-------------------------------------|------------------------------|
| `bnmo.guess`        | `play_guess(ask, out, rng=None)`     | score (0 if not found)       |
| `bnmo.dinerdash`    | `play_dinerdash(ask, out, rng=None)` | balance earned               |
| `bnmo.tictactoe`    | `play_tictactoe(ask, out)`           | `(player1, player2)` scores  |
| `bnmo.hanoi`        | `play_hanoi(ask, out)`               | score                        |
| `bnmo.snake`        | `play_snake(ask, out, rng=None)`     | twice the snake's length     |

```python
from bnmo.tictactoe import play_tictactoe

scores = play_tictactoe(input, print)
```

- **Guess the number** – find a number from 0 to 99 in ten tries; a hit
  scores `(tries left + 1) * 10` (`score_for_tries`).
- **Diner Dash** – `COOK M<n>`, `SERVE M<n>` or `SKIP` each round. Dishes must
  be served in order of the queue. The game ends once more than seven orders
  wait or fifteen have been served. `Kitchen` holds the game state and
  `food_id` parses a label like `M12`.
- **Tic-tac-toe** – two players enter cell numbers 1 to 9. A win gives 100 to
  the winner and 0 to the other, a draw 50 each. `new_board`, `check_win` and
  `render_board` work on a board on their own.
- **Tower of Hanoi** – move five discs from peg A to peg C. Up to 31 moves
  score 10, every 5 moves beyond cost a point (`score_for_moves`). `HanoiGame`
  and `Tower` can be used directly; a bad move raises `InvalidMove`.
- **Snake on Meteor** – steer with `w`, `a`, `s`, `d` on a 5×5 board that
  wraps at the edges; avoid the obstacle `Z` and the meteors `m`, eat the food
  `O` to grow. The board and body live in `bnmo.snakeboard` (`Grid`,
  `SnakeBody`).

## What this package does not do

There is no interactive console program and no installed command: nothing
reads commands such as `START`, `LOAD` or `PLAY GAME` from the terminal, and
nothing picks which game to run for a queued name. An application has to
read commands itself and call `Session` and the game functions. There is no
hangman game.

## Tests

```
pip install .[test]
pytest
```