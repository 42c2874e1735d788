# artlens

artlens applies artistic effects to photos and keeps track of which photos
came from which. It runs as an interactive program in the terminal, and its
filters and photo classes can also be used from Python code.

Images are handled as numpy arrays of shape `(height, width, 3)`, `uint8`,
in RGB channel order. Windows are opened with matplotlib.

## Installation

```
pip install .
```

To run the test suite, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## The photo library program

```
artlens
```

This opens a numbered menu that shows the currently selected photo:

- `1` load a photo from a file, give it a name and a tag; it becomes the
  current photo;
- `2` list the original photos and, under each one, the photos derived from
  it with their type;
- `3` select the current photo by name, or list the photos with a tag first;
- `4` show the current photo (a filtered photo is shown next to its original,
  separated by a white bar);
- `5` apply an artistic filter to the current photo and store the result under
  a new name: cartoon sketch, oil painting, pop filming, or a date stamp;
- `7` view the current photo's metadata: type, original or derivative, tags,
  resolution and, for a filtered photo, the filter applied;
- `8` save the current photo to a file (the format follows the extension);
- `9` delete a photo;
- `10` add a tag to the current photo;
- `11` make a side-by-side collage of the current photo and another one,
  labelled "Original" and "Filtered", with the option to save it before it is
  shown;
- `0` exit. The program also ends when input runs out.

A derived photo always points back to the original it came from, even when
it was made from another derived photo. Errors such as a missing file or no
photo being selected are printed and the menu carries on.

## The simple editor

```
artlens-menu
```

A smaller menu that works on one image at a time: load an image, apply
filters to it in place (pencil sketch, cartoon sketch, oil painting, pop
filming or a date stamp), show it, and save it: the name you give gets `.jpg`
appended.

## What it does not do

- The photo library lives in memory only; nothing is kept between runs
  except the image files you save.
- In `artlens-menu`, the "Face Detection", "Inpainting" and "One Color
  Painting" entries only print an "Under Construction" notice.
- There is no style transfer with trained models; the only derived photos are
  those made by the filters below.

## Using the filters from Python

`artlens.filters` works on image arrays and always returns a new array:

- `pencil_sketch(image)` – grayscale drawing (a 2-D array);
- `cartoon_sketch(image)` – smoothed colours with black outlines; the image
  must be at least 2×2 pixels;
- `oil_painting(image, size=7, levels=1)` – each pixel takes the mean colour
  of the most common intensity bin in a `(2*size+1)` window;
- `pop_filming(image)` – boosted saturation, brightness and contrast;
- `add_date(image, when=None, font_scale=None, padding=20)` – stamps the date
  in the bottom-right corner; without `font_scale` the text scales with the
  longer side of the image divided by 600;
- `date_text(when=None)` – the stamp text, in the form `'' MM DD YY`;
- `apply_filter(image, kind)` – applies the filter named by a `FilterKind`
  (`PENCIL_SKETCH`, `CARTOON_SKETCH`, `OIL_PAINTING`, `POP_FILMING`,
  `ADD_DATE`) or its label, such as `"Oil Painting"`.

Helpers used by these filters are available as well: `to_gray`,
`median_blur(image, size)` and `bilateral_filter(image, diameter,
sigma_color, sigma_space)`. Invalid images or settings raise `ValueError`.

```python
from artlens.filters import FilterKind, apply_filter
from artlens.photo import load_image, save_image

image = load_image("input.jpg")
save_image(apply_filter(image, FilterKind.OIL_PAINTING), "oil.png")
```

## Photos, collages and the library

`artlens.photo` provides `Photo` (name, image, path, tags and an
original/derivative label, with `load`, `save`, `show`, `add_tag`, `has_tag`,
`type_name`, `origin` and `metadata`) and `FilteredPhoto`, which copies
another photo, records the filter applied and tracks its original through
`set_source`. It also provides `load_image`, `save_image`, `display_image`
and `side_by_side(left, right, separator=3)`. Failures to load, save or show
an image raise `PhotoError`.

`artlens.collage` provides `make_collage(first, second)`, which resizes the
second image to the first one's size when they differ, and the
`ImageCollager` class, whose `load_second_image` accepts an array or a file
path.

`artlens.app` provides `PhotoLibrary`, the collection of named photos that the
`artlens` program manages (`load`, `select`, `with_tag`, `apply_filter`,
`delete`, `add_tag`, `originals`, `structure`), and `run(library, stdin,
stdout)`, which drives a library from any text streams.
`artlens.menu` provides `ImageLoader` and `Menu`, used by `artlens-menu`.