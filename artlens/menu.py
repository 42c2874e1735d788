"""A simple single-image editor driven from a text menu."""

from __future__ import annotations

import argparse
import os
import sys
from typing import TextIO

import numpy as np

from artlens.filters import (
    add_date,
    cartoon_sketch,
    oil_painting,
    pencil_sketch,
    pop_filming,
)
from artlens.photo import PhotoError, display_image, load_image, save_image

__all__ = ["ImageLoader", "Menu", "main"]

_UNDER_CONSTRUCTION = "***** Under Construction. *****"


class ImageLoader:
    """Holds the one image being edited."""

    def __init__(self) -> None:
        self.image: np.ndarray | None = None

    @property
    def loaded(self) -> bool:
        return self.image is not None and np.asarray(self.image).size > 0

    def load(self, path) -> np.ndarray:
        """Read the image at ``path``; raises :class:`PhotoError` on failure."""
        self.image = load_image(path)
        return self.image

    def save(self, filename) -> str:
        """Write the image as JPEG to ``filename`` with ``.jpg`` appended."""
        if not self.loaded:
            raise PhotoError("No image loaded.")
        path = os.fspath(filename) + ".jpg"
        save_image(self.image, path)
        return path

    def show(self) -> None:
        """Display the image in a window."""
        if not self.loaded:
            raise PhotoError("No image loaded.")
        display_image(self.image, "Processed Image")


_FILTERS = {
    "1": (pencil_sketch, "Applied Pencil Sketch."),
    "2": (cartoon_sketch, "Applied Cartoon Sketch."),
    "3": (oil_painting, "Applied Oil Painting."),
    "4": (pop_filming, "Applied Edge Painting."),
    "6": (lambda image: add_date(image, font_scale=6.0, padding=10), "Date Added."),
}


class Menu:
    """The main menu and the artistic filter sub-menu."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.loader = ImageLoader()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def run(self) -> None:
        """Show the main menu until the user chooses Exit or input ends."""
        try:
            while True:
                self._say("")
                self._say("----- Image Processing Menu -----")
                for line in ("1. Load Image", "2. Apply Artistic Filter", "3. Face Detection",
                             "4. Inpainting", "5. Show Image", "6. Save Image", "0. Exit"):
                    self._say(line)
                choice = self._ask("Select option: ").strip()
                if choice == "0":
                    self._say("Goodbye!")
                    return
                try:
                    self._dispatch(choice)
                except PhotoError as exc:
                    self._say(str(exc))
        except EOFError:
            self._say("")

    def _dispatch(self, choice: str) -> None:
        if choice == "1":
            path = self._ask("Enter image path: ")
            try:
                self.loader.load(path)
            except PhotoError:
                self._say("Image load failed.")
            else:
                self._say("Image loaded successfully.")
        elif choice == "2":
            self.filter_menu()
        elif choice in ("3", "4"):
            self._say(_UNDER_CONSTRUCTION)
        elif choice == "5":
            self.loader.show()
        elif choice == "6":
            filename = self._ask("Enter filename to save (without .jpg suffix): ")
            path = self.loader.save(filename)
            self._say(f"Image saved to: {path}")
        else:
            self._say("Invalid option.")

    def filter_menu(self) -> None:
        """Apply filters to the loaded image until the user chooses Back."""
        while True:
            self._say("")
            self._say("----- Artistic Filter Menu -----")
            for line in ("1. Pencil Sketch", "2. Cartoon Sketch", "3. Oil Painting",
                         "4. Pop Filming", "5. One Color Painting", "6. Add Date", "0. Back"):
                self._say(line)
            option = self._ask("Choose filter: ").strip()
            if option == "0":
                return
            if option == "5":
                self._say(_UNDER_CONSTRUCTION)
                continue
            entry = _FILTERS.get(option)
            if entry is None:
                self._say("Invalid option.")
                continue
            if not self.loader.loaded:
                self._say("No image loaded.")
                continue
            apply, message = entry
            try:
                self.loader.image = apply(self.loader.image)
            except ValueError as exc:
                self._say(f"Cannot apply filter: {exc}")
                continue
            self._say(message)


def main(argv=None) -> int:
    """Start the image processing menu."""
    parser = argparse.ArgumentParser(prog="artlens-menu",
                                     description="Edit one image from a text menu.")
    parser.parse_args(argv)
    Menu(sys.stdin, sys.stdout).run()
    return 0