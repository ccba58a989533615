# demo.py

import os
import argparse

import tagline
from tagline import ColorChoice

# Templates exercising every kind of tag and slot
EXAMPLE_LINES = [
    ("{$bold}tagline{/$} renders {$italic}styled{/$} templates", (), {}),
    ("{$red}red {$bold}bold red {$intense}bright bold red{/$}{/$} red{/$}", (), {}),
    ("{$bg:blue+white} white on blue {/$} {$#ff8000}true color{/$}", (), {}),
    ("{} {peter} {2} {} {0} {mary}", ("a", "b", "c"), {"peter": "p", "mary": "m"}),
    ("hex {[magenta]:x}, sci {[cyan]:e}, debug {[yellow]:?}", (255, 3.14, "text"), {}),
    ("{$underline}{{literal braces}}{/$}", (), {}),
]

def main():
    parser = argparse.ArgumentParser(description='tagline demo')
    parser.add_argument('--color',
        choices=[choice.value for choice in ColorChoice],
        help='When to emit escape sequences (overrides TAGLINE_COLOR)')
    args = parser.parse_args()

    if args.color:
        os.environ['TAGLINE_COLOR'] = args.color

    for template, positional, named in EXAMPLE_LINES:
        tagline.println(template, *positional, **named)

if __name__ == "__main__":
    main()
