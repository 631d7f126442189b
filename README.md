# nomcool

A small multiplication quiz played in a text console. Every correct answer
earns experience and gold, and a streak of correct answers earns a bonus.
Reaching level 2 unlocks the hard difficulty, and gold buys tinted mascot
skins in the shop. You can also create free skins of your own.

The menus and messages are in French.

## Installing

```
pip install .
```

## Playing

```
nomcool
```

Options:

- `--settings FILE` – keep progress and preferences in `FILE` instead of
  the per-user settings file;
- `--seed N` – seed the question generator, so the same questions come up
  every time.

From the home menu you can:

1. **Jouer** – choose a difficulty (easy, normal, or hard once level 2 is
   reached), turn the per-question timer on or off, and choose an endless
   game or a fixed number of questions (1 to 999). During a game, type the
   number of an answer, `a` to go back home, or `p` to pause (offered when
   the timer is on or the number of questions is fixed).
2. **Boutique** – spend gold on the skins Golden (15), Ice (30), Fire (50)
   and Shadow (80).
3. **Paramètres** – show or hide the mascot, and turn the music preference
   on or off.
4. **Skin** – wear any skin you own.
5. **Personnaliser** – create a free skin from a name (up to 24 characters)
   and a colour such as `#C864FF`.

`q` quits.

Each question offers three products plus an "I don't know" choice. On easy
(factors 1–5) and normal (1–10) the wrong answers come from shifting one
factor by one; on hard (1–15) they differ from the right answer by one.

When the mascot is shown, feedback comes with the name of the skin it wears;
when it is hidden, a wrong answer is followed by the correct one.

## Progress

Experience, gold, owned skins, the selected skin, custom skins and the
settings are kept in a JSON settings file between sessions; its location is
given by `nomcool.settings.default_settings_path()`. The streak is not saved.

Levels start at 0, 10, 30, 60, ... experience points (`5 * L * (L - 1)` for
level `L`, see `nomcool.experience.xp_threshold_for_level`). A correct answer
earns 1, 2 or 4 points on easy, normal or hard, plus a streak bonus equal to
the current streak, up to 5. Gold is earned at the same rate.

## What it does not do

- There is no graphical window: the mascot is only named, not drawn, and
  the shop lists skins without previews.
- No music is played. The music setting is stored and shown, nothing more.
- The timer (10 seconds per question) cannot interrupt typing: it is
  checked when an answer is entered, and an answer given after it ran out
  counts as "time's up".

## Using it as a library

```python
from nomcool.experience import Experience
from nomcool.models import Difficulty, GameConfig
from nomcool.questions import QuestionGenerator
from nomcool.session import GameSession, feedback_text
from nomcool.settings import SettingsStore

store = SettingsStore("progress.json")   # SettingsStore() keeps it in memory
experience = Experience(store)
experience.load()

session = GameSession(
    experience,
    QuestionGenerator(),
    GameConfig(difficulty=Difficulty.EASY, has_timer=False, question_count=5),
)
while not session.finished():
    print(session.current.question)
    label, response = session.current.answers[0]
    result = session.answer(response)
    print(feedback_text(result, session.last_correct_answer))
```

Other pieces:

- `nomcool.skins.SkinManager` – the skin catalogue, ownership, selection,
  `purchase` (raises `PurchaseError`) and `add_custom_skin`;
- `nomcool.shop.shop_items` and `nomcool.shop.buy` – the shop's rows and
  buying with the player's gold;
- `nomcool.timer.QuestionTimer` – a pausable countdown with an injectable
  clock;
- `nomcool.app.App` – the console game, with injectable input, output,
  question generator and clock.

## Running the tests

```
pip install .[test]
pytest
```