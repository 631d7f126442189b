import io

from nomcool.app import App, main
from nomcool.models import Difficulty, GameConfig
from nomcool.questions import QuestionGenerator
from nomcool.session import UNLOCK_MESSAGE
from nomcool.settings import SettingsStore, mascot_enabled, set_mascot_enabled
from nomcool.skins import Color


class FixedRng:
    """Always draws the same factor and never reorders answers."""

    def __init__(self, value=3):
        self.value = value

    def randint(self, low, high):
        return self.value

    def shuffle(self, items):
        pass


class Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def scripted(*answers):
    items = iter(answers)

    def ask(prompt):
        try:
            return next(items)
        except StopIteration:
            raise EOFError

    return ask


def make_app(*answers, store=None, clock=None, input_func=None):
    out = io.StringIO()
    app = App(
        store=store if store is not None else SettingsStore(),
        input_func=input_func if input_func is not None else scripted(*answers),
        output=out,
        generator=QuestionGenerator(FixedRng()),
        clock=clock,
    )
    return app, out


def test_play_correct_answers_finishes_and_saves():
    app, out = make_app("1", "1")
    session = app.play(GameConfig(Difficulty.NORMAL, False, 2))
    assert session.finished()
    assert session.score.correct == 2
    assert session.score.total == 2
    assert app.store.get("experience/totalXP") == app.experience.total_xp
    assert "Partie terminée !" in out.getvalue()


def test_play_dont_know_counts_as_failure():
    app, out = make_app("4")
    session = app.play(GameConfig(Difficulty.NORMAL, False, 1))
    assert (session.score.correct, session.score.total) == (0, 1)
    assert "Tu y arriveras !" in out.getvalue()


def test_feedback_names_correct_answer_without_mascot():
    store = SettingsStore()
    set_mascot_enabled(store, False)
    app, out = make_app("2", store=store)
    app.play(GameConfig(Difficulty.NORMAL, False, 1))
    assert "La bonne réponse était : 9" in out.getvalue()


def test_mascot_speaks_without_correct_answer_line():
    app, out = make_app("2")
    app.play(GameConfig(Difficulty.NORMAL, False, 1))
    text = out.getvalue()
    assert "Non, ce n'est pas ça !" in text
    assert "La bonne réponse" not in text


def test_timer_runs_out():
    clock = Clock()

    def slow(prompt):
        clock.now += 20
        return "1"

    app, out = make_app(clock=clock, input_func=slow)
    session = app.play(GameConfig(Difficulty.NORMAL, True, 1))
    assert (session.score.correct, session.score.total) == (0, 1)
    assert "Temps écoulé !" in out.getvalue()


def test_pause_stops_the_clock():
    clock = Clock()
    steps = iter([(5, "p"), (100, ""), (1, "1")])

    def ask(prompt):
        delta, text = next(steps)
        clock.now += delta
        return text

    app, _ = make_app(clock=clock, input_func=ask)
    session = app.play(GameConfig(Difficulty.NORMAL, True, 1))
    assert session.score.correct == 1


def test_back_to_home_leaves_game_unfinished():
    app, out = make_app("a")
    session = app.play(GameConfig(Difficulty.NORMAL, True, None))
    assert not session.finished()
    assert session.score.total == 0
    assert "Retour à l'accueil." in out.getvalue()


def test_hard_unlock_announced():
    app, out = make_app("1", "1", "1")
    app.play(GameConfig(Difficulty.NORMAL, False, 3))
    assert app.experience.is_hard_unlocked()
    assert UNLOCK_MESSAGE in out.getvalue()


def test_setup_reads_choices():
    app, _ = make_app("1", "2", "5")
    assert app.setup() == GameConfig(Difficulty.EASY, False, 5)


def test_setup_defaults():
    app, _ = make_app("", "", "")
    assert app.setup() == GameConfig(Difficulty.NORMAL, True, None)


def test_setup_refuses_locked_hard_and_bad_count():
    app, out = make_app("3", "2", "1", "1000", "7")
    config = app.setup()
    assert config == GameConfig(Difficulty.NORMAL, True, 7)
    assert "verrouillé" in out.getvalue()


def test_setup_back_returns_none():
    app, _ = make_app("r")
    assert app.setup() is None


def test_shop_buys_affordable_skin():
    store = SettingsStore()
    store.set("experience/gold", 20)
    app, out = make_app("2", "", store=store)
    app.shop()
    assert app.skins.is_owned(1)
    assert app.experience.gold == 5
    assert "Golden acheté !" in out.getvalue()


def test_shop_refuses_expensive_and_owned_skins():
    store = SettingsStore()
    store.set("experience/gold", 20)
    app, _ = make_app("5", "1", "", store=store)
    app.shop()
    assert not app.skins.is_owned(4)
    assert app.experience.gold == 20


def test_settings_toggle_mascot():
    app, _ = make_app("1", "")
    app.settings()
    assert mascot_enabled(app.store) is False


def test_customize_adds_owned_skin():
    app, _ = make_app("Mon skin", "nope", "#ff0000")
    skin = app.customize()
    assert skin.name == "Mon skin"
    assert skin.tint == Color(255, 0, 0)
    assert app.skins.all_skins()[-1] == skin
    assert app.skins.is_owned(len(app.skins.all_skins()) - 1)


def test_customize_default_colour_and_cancel():
    app, _ = make_app("Violet", "")
    assert app.customize().tint == Color(200, 100, 255)
    before = len(app.skins.all_skins())
    cancelled, _ = make_app("")
    assert cancelled.customize() is None
    assert len(app.skins.all_skins()) == before


def test_choose_skin_selects_owned():
    store = SettingsStore()
    store.set("skin/owned", ["0", "2"])
    app, _ = make_app("2", store=store)
    skin = app.choose_skin()
    assert app.skins.selected_skin_index() == 2
    assert skin.name == "Ice"


def test_run_quits_and_handles_eof():
    app, out = make_app("q")
    assert app.run() == 0
    assert "Au revoir !" in out.getvalue()
    silent, _ = make_app()
    assert silent.run() == 0


def test_run_full_game_then_settings():
    app, _ = make_app("1", "1", "2", "1", "1", "3", "1", "", "q")
    assert app.run() == 0
    assert app.experience.total_xp > 0
    assert app.store.get("experience/totalXP") == app.experience.total_xp
    assert mascot_enabled(app.store) is False


def test_main_runs_until_quit(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted("q"))
    status = main(["--settings", str(tmp_path / "settings.json"), "--seed", "1"])
    assert status == 0
    assert "1) Jouer" in capsys.readouterr().out