# fractol

A small pure-Python library with two parts:

- `fractol.mlx`: reading XPM images, looking up X11 colour names, and the
  substring search and word splitting the XPM reader is built on.
- `fractol.libft`: helpers for ASCII characters, byte buffers, NUL-aware
  strings, a singly linked list, writing to streams, reading a stream line
  by line, and printf-style formatting.

## Installing

```
pip install .
```

There are no dependencies outside the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## XPM images and colours

```python
from fractol.mlx.xpm import xpm_to_image, xpm_file_to_image
from fractol.mlx.colors import lookup_color

image = xpm_to_image(["2 1 2 1", "a c #FF0000", "b c None", "ab"])
image.width, image.height   # (2, 1)
image.pixels                # ((0xFF0000, 0xFF000000),)

lookup_color("Sky Blue")    # 0x87CEEB
lookup_color("none")        # -1
lookup_color("no such")     # None
```

- `xpm_to_image(lines)` decodes an image from its header, colour and pixel
  lines; `xpm_file_to_image(path)` reads an XPM file in its C-source form,
  dropping comments outside quoted strings and taking the quoted lines.
- The result is an `XpmImage` with `width`, `height` and `pixels`, rows of
  0xAARRGGBB values. A colour of `None` becomes `0xFF000000`.
- Colours are given as `#hex` or as a colour name, matched without regard
  to case. Unknown names give 0.
- Bad data raises `XpmError`, a `ValueError`.

Lower-level pieces are `parse_xpm`, `text_to_rgb`, `strip_comments` and
`quoted_lines` in `fractol.mlx.xpm`, and `find`, `find_outside_quotes` and
`split_words` in `fractol.mlx.wordtab`.

## Helpers

```python
import io
from fractol.libft.printf import sprintf
from fractol.libft.strings import split, strlcpy
from fractol.libft.linked_list import LinkedList
from fractol.libft.line_reader import LineReader

sprintf("%d items, %x", 42, 255)     # "42 items, ff"
sprintf("%u", -1)                    # "4294967295"
split("  hello  world ", " ")        # ["hello", "world"]
strlcpy("hello", 3)                  # ("he", 5)

items = LinkedList([1, 2, 3])
len(items)                           # 3
list(items.map(lambda x: x * 2))     # [2, 4, 6]

list(LineReader(io.StringIO("a\nb")))   # ["a\n", "b"]
```

- `fractol.libft.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper`, `itoa`.
- `fractol.libft.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on `bytearray` buffers.
- `fractol.libft.strings`: `strlen`, `strchr`, `strrchr`, `strdup`,
  `strjoin`, `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `substr`,
  `strtrim`, `split`, `strmapi`, `striteri`.
- `fractol.libft.linked_list`: `Node` and `LinkedList` with `add_front`,
  `add_back`, `last`, `iterate`, `map` and `clear`.
- `fractol.libft.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  writing to a stream or standard output.
- `fractol.libft.line_reader`: `LineReader`, over a file object or a file
  descriptor, text or binary.
- `fractol.libft.printf`: `sprintf` and `printf_to`, with the conversions
  `%c %s %p %d %i %u %x %X %%`.

## What this package does not do

It does not draw fractals, open a window or handle keyboard and mouse
input, and it installs no command. It is a library of the pieces listed
above.