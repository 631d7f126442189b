"""The interactive game: home screen, game setup, play, shop and settings."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, List, Optional, TextIO

from nomcool.experience import Experience
from nomcool.models import TIME_UP, Difficulty, GameConfig
from nomcool.questions import QuestionGenerator
from nomcool.session import (
    REMAINING_FORMAT,
    UNLOCK_MESSAGE,
    GameSession,
    experience_lines,
    feedback_text,
    score_text,
)
from nomcool.settings import (
    SettingsStore,
    default_settings_path,
    mascot_enabled,
    music_enabled,
    set_mascot_enabled,
    set_music_enabled,
)
from nomcool.shop import buy, shop_items
from nomcool.skins import Color, PurchaseError, Skin, SkinManager
from nomcool.timer import QuestionTimer

MAX_QUESTIONS = 999
MAX_SKIN_NAME = 24
DEFAULT_CUSTOM_COLOR = Color(200, 100, 255)

_DIFFICULTY_CHOICES = {
    "": Difficulty.NORMAL,
    "1": Difficulty.EASY,
    "2": Difficulty.NORMAL,
    "3": Difficulty.HARD,
}
_TIMER_CHOICES = {"": True, "1": True, "2": False}


class App:
    """Runs the game in a text console.

    ``input_func`` is called with a prompt and returns the player's line;
    raising ``EOFError`` means the player has gone.
    """

    def __init__(
        self,
        store: Optional[SettingsStore] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
        generator: Optional[QuestionGenerator] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.store = store if store is not None else SettingsStore()
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout
        self.generator = generator if generator is not None else QuestionGenerator()
        self.clock = clock
        self.experience = Experience(self.store)
        self.experience.load()
        self.skins = SkinManager(self.store)

    def _say(self, *lines: str) -> None:
        for line in lines:
            self._output.write(line + "\n")
        self._output.flush()

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt).strip()
        except EOFError:
            return None

    # --- Home -----------------------------------------------------------

    def _show_home(self) -> None:
        self._say("", "=== NomCool ===", *experience_lines(self.experience))
        if mascot_enabled(self.store):
            self._say(f"Mascotte : {self.skins.selected_skin().name}")
        self._say(
            f"Musique : {'activée' if music_enabled(self.store) else 'désactivée'}",
            "1) Jouer",
            "2) Boutique",
            "3) Paramètres",
            "4) Skin",
            "5) Personnaliser",
            "q) Quitter",
        )

    def run(self) -> int:
        """Show the home screen until the player quits; returns the exit status."""
        while True:
            self._show_home()
            choice = self._ask("Choix : ")
            if choice is None or choice.lower() == "q":
                self._say("Au revoir !")
                return 0
            if choice == "1":
                config = self.setup()
                if config is not None:
                    self.play(config)
            elif choice == "2":
                self.shop()
            elif choice == "3":
                self.settings()
            elif choice == "4":
                self.choose_skin()
            elif choice == "5":
                self.customize()
            else:
                self._say("Choix inconnu.")

    # --- Setup ----------------------------------------------------------

    def setup(self) -> Optional[GameConfig]:
        """Ask for difficulty, timer and question count; None means back."""
        self._say("", "Configuration de la partie")
        hard_unlocked = self.experience.is_hard_unlocked()
        hard_label = "3) Difficile" + ("" if hard_unlocked else " (verrouillé)")

        while True:
            self._say("Difficulté : 1) Facile  2) Normal  " + hard_label)
            answer = self._ask("Difficulté [2] (r = retour) : ")
            if answer is None or answer.lower() == "r":
                return None
            difficulty = _DIFFICULTY_CHOICES.get(answer)
            if difficulty is None:
                self._say("Choix inconnu.")
                continue
            if difficulty is Difficulty.HARD and not hard_unlocked:
                self._say("Difficile est verrouillé : atteins le niveau 2.")
                continue
            break

        while True:
            self._say("Chronomètre : 1) Activé  2) Désactivé")
            answer = self._ask("Chronomètre [1] : ")
            if answer is None:
                return None
            if answer in _TIMER_CHOICES:
                has_timer = _TIMER_CHOICES[answer]
                break
            self._say("Choix inconnu.")

        while True:
            answer = self._ask(
                f"Nombre de questions (Entrée = infini, 1-{MAX_QUESTIONS}) : "
            )
            if answer is None:
                return None
            if not answer:
                count: Optional[int] = None
                break
            if answer.isdigit() and 1 <= int(answer) <= MAX_QUESTIONS:
                count = int(answer)
                break
            self._say(f"Entre un nombre entre 1 et {MAX_QUESTIONS}.")

        return GameConfig(difficulty=difficulty, has_timer=has_timer, question_count=count)

    # --- Play -----------------------------------------------------------

    def _show_question(self, session: GameSession, timer: Optional[QuestionTimer]) -> None:
        self._say("", score_text(session.score))
        count = session.config.question_count
        if count is not None and count > 0:
            self._say(REMAINING_FORMAT.format(session.questions_remaining))
        if timer is not None:
            self._say(f"Temps : {timer.remaining():.0f} s")
        self._say(session.current.question)
        self._say(
            "  ".join(
                f"{number}) {label}"
                for number, (label, _) in enumerate(session.current.answers, start=1)
            )
        )

    def _read_response(
        self, session: GameSession, timer: Optional[QuestionTimer], can_pause: bool
    ) -> Optional[str]:
        answers = session.current.answers
        hint = "numéro" + (", p = pause" if can_pause else "") + ", a = accueil"
        while True:
            text = self._ask(f"Réponse ({hint}) : ")
            if text is None or text.lower() == "a":
                return None
            if timer is not None and timer.expired():
                return TIME_UP
            if can_pause and text.lower() == "p":
                if timer is not None:
                    timer.pause()
                self._say("Pause")
                if self._ask("Entrée pour reprendre : ") is None:
                    return None
                if timer is not None:
                    timer.resume()
                self._show_question(session, timer)
                continue
            if text.isdigit() and 1 <= int(text) <= len(answers):
                return answers[int(text) - 1][1]
            self._say("Réponse inconnue.")

    def play(self, config: GameConfig) -> GameSession:
        """Play one game with ``config`` and return the session when it ends."""
        session = GameSession(self.experience, self.generator, config)
        timer = QuestionTimer(clock=self.clock) if config.has_timer else None
        can_pause = config.has_timer or config.question_count is not None
        show_mascot = mascot_enabled(self.store)
        self._say("", *experience_lines(self.experience))

        while not session.finished():
            self._show_question(session, timer)
            if timer is not None:
                timer.start()
            response = self._read_response(session, timer, can_pause)
            if timer is not None:
                timer.stop()
            if response is None:
                self.experience.save()
                self._say("Retour à l'accueil.")
                return session

            result = session.answer(response)
            if show_mascot:
                self._say(f"{self.skins.selected_skin().name} : {result.message}")
            else:
                self._say(feedback_text(result, session.last_correct_answer))
            self._say(*experience_lines(self.experience))
            if session.hard_unlocked_now:
                self._say(UNLOCK_MESSAGE)

        self._say("Partie terminée !", score_text(session.score))
        return session

    # --- Shop, settings, skins -----------------------------------------

    def shop(self) -> None:
        """List the skins for sale and buy the ones the player picks."""
        while True:
            self._say("", "Boutique", f"Gold: {self.experience.gold}")
            for item in shop_items(self.skins, self.experience):
                line = f"{item.index + 1}) {item.name} - {item.price_label} - {item.action_label}"
                if not item.owned and not item.affordable:
                    line += " (trop cher)"
                self._say(line)
            choice = self._ask("Acheter (numéro, Entrée = fermer) : ")
            if not choice:
                return
            if not choice.isdigit():
                self._say("Choix inconnu.")
                continue
            try:
                skin = buy(self.skins, self.experience, int(choice) - 1)
            except PurchaseError as error:
                self._say(str(error))
            else:
                self._say(f"{skin.name} acheté !")

    def settings(self) -> None:
        """Toggle the mascot and music preferences."""
        while True:
            mascot = mascot_enabled(self.store)
            music = music_enabled(self.store)
            self._say(
                "",
                "Paramètres",
                f"1) Afficher la mascotte : {'oui' if mascot else 'non'}",
                f"2) Musique de fond : {'oui' if music else 'non'}",
            )
            choice = self._ask("Basculer (numéro, Entrée = fermer) : ")
            if not choice:
                return
            if choice == "1":
                set_mascot_enabled(self.store, not mascot)
            elif choice == "2":
                set_music_enabled(self.store, not music)
            else:
                self._say("Choix inconnu.")

    def customize(self) -> Optional[Skin]:
        """Create a custom skin from a name and a colour; None if cancelled."""
        self._say("", "Créer un skin personnalisé")
        name = self._ask(f"Nom (max {MAX_SKIN_NAME} caractères, Entrée = annuler) : ")
        if not name:
            self._say("Annulé.")
            return None
        name = name[:MAX_SKIN_NAME].strip()

        while True:
            default = DEFAULT_CUSTOM_COLOR.name().upper()
            text = self._ask(f"Couleur [{default}] : ")
            if text is None:
                self._say("Annulé.")
                return None
            if not text:
                color = DEFAULT_CUSTOM_COLOR
                break
            try:
                color = Color.from_name(text)
            except ValueError:
                self._say("Couleur invalide, utilise la forme #RRGGBB.")
                continue
            break

        self.skins.add_custom_skin(name, color)
        skin = self.skins.all_skins()[-1]
        self._say(f"Skin {skin.name} ({skin.tint.name().upper()}) créé !")
        return skin

    def choose_skin(self) -> Skin:
        """Let the player wear one of the owned skins; returns the skin worn."""
        owned: List[int] = self.skins.owned_skin_indices()
        skins = self.skins.all_skins()
        selected = self.skins.selected_skin_index()
        self._say("", "Skins")
        for number, index in enumerate(owned, start=1):
            marker = " *" if index == selected else ""
            self._say(f"{number}) {skins[index].name}{marker}")
        choice = self._ask("Skin (numéro, Entrée = garder) : ")
        if choice and choice.isdigit() and 1 <= int(choice) <= len(owned):
            self.skins.select_skin(owned[int(choice) - 1])
        elif choice:
            self._say("Choix inconnu.")
        return self.skins.selected_skin()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nomcool", description="Practise multiplication tables."
    )
    parser.add_argument("--settings", help="settings file to use")
    parser.add_argument("--seed", type=int, help="seed for the questions")
    args = parser.parse_args(argv)

    store = SettingsStore(args.settings if args.settings else default_settings_path())
    generator = (
        QuestionGenerator(random.Random(args.seed))
        if args.seed is not None
        else QuestionGenerator()
    )
    return App(store=store, generator=generator).run()


if __name__ == "__main__":
    raise SystemExit(main())