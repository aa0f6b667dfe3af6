# oslabtools

This package provides two small command-line tools.

- **image-contrast** changes the contrast of an image file. It splits the work across several threads, and each thread handles its own band of rows.
- **git-fetcher** runs `git fetch origin` in each subfolder of a catalog that you confirm.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## image-contrast

```
image-contrast [numThreads] [factor] [input] [output]
```

The tool needs four values: the number of threads, the contrast factor, the input image path and the output image path.

You can give these values as arguments. For each value you leave out, the tool prompts you, and it reads your answers as whitespace-separated words from standard input.

The tool returns exit status 1 with an error message in these cases:

- a thread count or factor that is not a number
- a factor outside the range (0, 2]
- a thread count below 1
- an input file that is missing, empty or cannot be decoded

Passing more than four arguments prints a usage line and returns exit status 2.

### How the contrast changes

Each pixel is converted to RGB. Every channel value `v` then becomes `clamp(int((v - 128) * factor) + 128, 0, 255)`, with the fractional part truncated toward zero.

### Output format

The extension of the output path sets the format:

- `.jpg` or `.jpeg` writes a JPEG file.
- Any other extension writes a PNG file.
- An output path with no extension raises `ValueError`.

### Thread messages

When a worker thread finishes, it prints a line to standard output:

```
Thread <id> contrast thread finished successfully
```

### From Python

The functions in `oslabtools.contrast` are:

```python
from oslabtools.contrast import (
    adjust_contrast,
    change_contrast,
    change_contrast_command,
    change_contrast_many,
    read_image,
    write_image,
)

change_contrast("in.png", "out.png", 1.5, 4)
change_contrast_many(["a.png", "b.jpg"], ["a2.png", "b2.jpg"], 0.5, 2)
change_contrast_command("in.png out.png 1.2 4")

pixels = read_image("in.png")        # uint8 array, shape (height, width, 3)
adjust_contrast(pixels, 1.5, 4)      # modifies the array in place and returns it
write_image("out.jpg", pixels)
```

`change_contrast_many` works through the input/output pairs as follows:

- It processes each pair in its own thread.
- After all the images have finished, it re-raises the first error that occurred.
- If the two lists differ in length, it raises `ValueError`.

`change_contrast_command` takes a single string that holds the input path, the output path, the factor and the thread count. If the string has fewer than four words, it prints a usage line to standard error and does nothing else.

## git-fetcher

```
git-fetcher [catalog]
```

1. If you do not give a catalog, the tool asks for one. An empty answer ends the run with the message `Empty folder selected.`
2. The tool lists the directories directly inside the catalog, in sorted order. It does not follow symbolic links.
3. For each directory it prints the folder and asks `Do you wish to fetch this folder? (y/n)`.
4. It runs `git fetch origin` in that directory only if your answer starts with `y`. For any other answer it prints `Process terminated.`

If the catalog cannot be read, the tool returns exit status 1.

### From Python

The helpers in `oslabtools.gitfetch` are:

- `catalog_folders(catalog)` returns the subdirectory paths.
- `browse_folder(saved_path="")` reads a path and falls back to `saved_path` if the answer is empty.
- `execute_fetch(folder, confirm=None)` decides whether to fetch and then runs git:
  - `confirm` is an optional callable that receives the folder and returns whether to fetch.
  - It returns git's exit status.
  - It returns `None` when nothing was run.

## Limitations

- git-fetcher reads the catalog path from the argument or from a text prompt. It has no graphical folder picker.
- It waits for each fetch to finish before it asks about the next folder.