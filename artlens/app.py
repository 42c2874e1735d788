"""Interactive photo library: load photos, derive filtered versions, browse and save them."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from artlens.collage import ImageCollager
from artlens.filters import FilterKind, apply_filter
from artlens.photo import FilteredPhoto, Photo, PhotoError, display_image, save_image

__all__ = ["PhotoLibrary", "run", "main"]

_FILTER_CHOICES = {
    "1": FilterKind.CARTOON_SKETCH,
    "2": FilterKind.OIL_PAINTING,
    "3": FilterKind.POP_FILMING,
    "4": FilterKind.ADD_DATE,
}


class PhotoLibrary:
    """Named photos, the currently selected one, and which photos derive from which."""

    def __init__(self) -> None:
        self.photos: dict[str, Photo] = {}
        self.derivatives: dict[str, list[str]] = {}
        self.current: str | None = None

    @property
    def current_photo(self) -> Photo:
        """The selected photo; raises :class:`PhotoError` when none is selected."""
        if self.current is None or self.current not in self.photos:
            raise PhotoError("No photo selected.")
        return self.photos[self.current]

    def load(self, name: str, path, tag: str) -> Photo:
        """Load an original photo from ``path`` under ``name`` and select it."""
        photo = Photo()
        photo.load(path)
        photo.name = name
        photo.lineage = "Original"
        photo.add_tag(tag)
        self.photos[name] = photo
        self.current = name
        return photo

    def originals(self) -> list[str]:
        """Names of the original (unfiltered) photos, in name order."""
        return [name for name, photo in sorted(self.photos.items())
                if photo.type_name() == "Photo"]

    def structure(self) -> dict[str, list[tuple[str, str]]]:
        """Each original's name mapped to its derivatives as ``(name, type)`` pairs."""
        return {
            origin: [(name, self.photos[name].type_name())
                     for name in names if name in self.photos]
            for origin, names in sorted(self.derivatives.items())
        }

    def select(self, name: str) -> Photo:
        """Make ``name`` the current photo."""
        if name not in self.photos:
            raise KeyError(name)
        self.current = name
        return self.photos[name]

    def with_tag(self, tag: str) -> list[str]:
        """Names of the photos carrying ``tag``, in name order."""
        return [name for name, photo in sorted(self.photos.items()) if photo.has_tag(tag)]

    def apply_filter(self, new_name: str, kind: FilterKind) -> FilteredPhoto:
        """Filter the current photo into a new photo called ``new_name``."""
        base = self.current_photo
        kind = FilterKind(kind)
        image = apply_filter(base.image, kind)
        filtered = FilteredPhoto(base, kind.value)
        filtered.image = image
        filtered.name = new_name
        filtered.set_source(base)
        filtered.add_tag(kind.value)
        self.photos[new_name] = filtered

        source = base.origin()
        origin_name = source.name if source is not None else base.name
        self.derivatives.setdefault(origin_name, []).append(new_name)
        return filtered

    def delete(self, name: str) -> None:
        """Remove the photo ``name`` and every mention of it as a derivative."""
        if name not in self.photos:
            raise KeyError(name)
        del self.photos[name]
        if self.current == name:
            self.current = None
        for origin, names in self.derivatives.items():
            self.derivatives[origin] = [n for n in names if n != name]

    def add_tag(self, tag: str) -> None:
        """Tag the current photo."""
        self.current_photo.add_tag(tag)


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


def _main_menu(console: _Console, current: str | None) -> None:
    console.say("")
    console.say("----- Image Processing Menu -----")
    console.say(f"Current photo: {current if current else '(none)'}")
    for line in (
        "1. Load a Photo",
        "2. List All Photos",
        "3. Select Current Photo",
        "4. Show Current Photo",
        "5. Apply Artistic Filter",
        "7. View Metadata",
        "8. Download Current Photo",
        "9. Delete a Photo",
        "10. Add Tag to Current Photo",
        "11. Create Collage",
        "0. Exit",
    ):
        console.say(line)


def _filter_menu(console: _Console, current: str | None) -> None:
    console.say(f"----- Artistic Filter Menu ({current}) -----")
    for key, kind in _FILTER_CHOICES.items():
        console.say(f"{key}. {kind.value}")


def _choose(console: _Console, library: PhotoLibrary) -> None:
    name = console.ask("Please enter photo name to select: ")
    try:
        library.select(name)
    except KeyError:
        console.say("Photo not found.")
    else:
        console.say(f"Photo '{name}' selected.")


def _do_load(console: _Console, library: PhotoLibrary) -> None:
    name = console.ask("Please name the photo: ")
    path = console.ask("Please enter the file path: ")
    tag = console.ask("Please enter a tag for this photo: ")
    library.load(name, path, tag)
    console.say(f"Photo loaded as: {name}")


def _do_list(console: _Console, library: PhotoLibrary) -> None:
    console.say("All Original Photo:")
    for name in library.originals():
        console.say(f"- {name}")
    console.say("Photos Structure:")
    for origin, derived in library.structure().items():
        console.say(f"- {origin} [Original]")
        for name, type_name in derived:
            console.say(f"    - {name} [{type_name}]")


def _do_select(console: _Console, library: PhotoLibrary) -> None:
    search = console.ask("Do you want to search by: \n 1. Name \n 2. Tag \nOption: ").strip()
    if search == "1":
        for name in sorted(library.photos):
            console.say(f" - {name}")
        _choose(console, library)
    elif search == "2":
        tag = console.ask("Please enter a tag to search: ")
        console.say(f"Photos with tag '{tag}': ")
        for name in library.with_tag(tag):
            console.say(f" - {name}")
        _choose(console, library)
    else:
        console.say("Invalid option. ")


def _do_filter(console: _Console, library: PhotoLibrary) -> None:
    library.current_photo
    new_name = console.ask("Please name for the new filtered photo: ")
    _filter_menu(console, library.current)
    kind = _FILTER_CHOICES.get(console.ask("Choose filter: ").strip())
    if kind is None:
        console.say("Invalid filter. ")
        return
    library.apply_filter(new_name, kind)
    console.say(f"Applied {kind.value}.")
    console.say(f"New filtered photo created as '{new_name}'")


def _do_save(console: _Console, library: PhotoLibrary) -> None:
    photo = library.current_photo
    path = console.ask("Enter path to save: ")
    photo.save(path)
    console.say(f"Saved image to: {path}")


def _do_delete(console: _Console, library: PhotoLibrary) -> None:
    name = console.ask("Enter name of photo to delete: ")
    try:
        library.delete(name)
    except KeyError:
        console.say("Photo not found.")
    else:
        console.say(f"Deleted photo '{name}'")


def _do_tag(console: _Console, library: PhotoLibrary) -> None:
    library.current_photo
    tag = console.ask("Enter tag to add: ")
    library.add_tag(tag)
    console.say("Tag added.")


def _do_collage(console: _Console, library: PhotoLibrary) -> None:
    collager = ImageCollager()
    collager.load_image(library.current_photo.image)
    second = console.ask("Enter the name of the filtered or transferred photo: ")
    if second not in library.photos:
        console.say("The selected filtered/modified photo does not exist.")
        return
    collager.load_second_image(library.photos[second].image)
    collage = collager.create_collage()
    choice = console.ask("Would you like to save the collage? (y/n): ").strip()
    if choice in ("y", "Y"):
        path = console.ask("Enter the path to save the collage (e.g., collage.jpg): ").strip()
        save_image(collage, path)
        console.say(f"Collage saved to {path}")
    display_image(collage, "Collage")
    console.say("Collage created successfully!")


def _do_show(console: _Console, library: PhotoLibrary) -> None:
    library.current_photo.show()


def _do_metadata(console: _Console, library: PhotoLibrary) -> None:
    console.say(library.current_photo.metadata())


_ACTIONS = {
    "1": _do_load,
    "2": _do_list,
    "3": _do_select,
    "4": _do_show,
    "5": _do_filter,
    "7": _do_metadata,
    "8": _do_save,
    "9": _do_delete,
    "10": _do_tag,
    "11": _do_collage,
}


def run(library: PhotoLibrary | None = None, stdin: TextIO | None = None,
        stdout: TextIO | None = None) -> PhotoLibrary:
    """Drive ``library`` from the menu until the user exits or input ends."""
    library = library if library is not None else PhotoLibrary()
    console = _Console(stdin if stdin is not None else sys.stdin,
                       stdout if stdout is not None else sys.stdout)
    try:
        while True:
            _main_menu(console, library.current)
            choice = console.ask("Select option: ").strip()
            if choice == "0":
                console.say("Goodbye!")
                break
            action = _ACTIONS.get(choice)
            if action is None:
                console.say("Invalid option.")
                continue
            try:
                action(console, library)
            except (PhotoError, ValueError) as exc:
                console.say(str(exc))
    except EOFError:
        console.say("")
    return library


def main(argv=None) -> int:
    """Start the interactive photo library."""
    parser = argparse.ArgumentParser(prog="artlens",
                                     description="Interactive artistic photo library.")
    parser.parse_args(argv)
    run(PhotoLibrary(), sys.stdin, sys.stdout)
    return 0