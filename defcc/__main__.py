# This file is the main entry point into defcc.

import sys

from defcc import driver
from defcc import lexer
from defcc import parser
from defcc import serialization
from defcc import syntax_to_js
from defcc.errors import CompileError


def usage(fd):
    msg = """Usage: defcc [options] <source file>
  --help: print this message.

Output:
  -o foo.js: write the program to 'foo.js' (default: stdout).
  -o -: write the program to stdout.

Observing the pipeline:
  --tokens: print the tokens and exit.
  --ast: print the syntax tree and exit.
  --indent 4: control the indentation of --tokens and --ast.

Stopping early:
  --lex: stop after lexing.
  --parse: stop after parsing.

Example invocations:
  $ defcc test.src
    Print the JavaScript for test.src.

  $ defcc -o test.js test.src && node test.js
    Compile test.src into test.js and run it.

  $ defcc --ast test.src
    Print the syntax tree for test.src.
"""
    fd.write(msg)


def parse_command_line(argv: list[str]) -> tuple[set, dict, list]:
    """Parse the command line, returning flags, options, and args.
    Flags don't expect an argument, e.g. '--ast'.
    Options expect an argument, e.g. '-o test.js'.
    Args are everything left over after parsing flags and options.
    """
    # flags don't expect an argument:
    flag_names = set([
        '--help',
        # stop early:
        '--lex', '--parse',
        # serialization flags:
        '--tokens', '--ast',
    ])
    # options expect an argument:
    option_names = set(['-o', '--indent'])
    flags = set()
    options = {}
    args = []
    i = 1
    while i < len(argv):
        arg = argv[i]
        if arg in flag_names:
            flags.add(arg)
        elif arg in option_names:
            i += 1
            if i >= len(argv):
                sys.stderr.write(f"Error: option '{arg}' expects an argument.\n")
                usage(sys.stderr)
                sys.exit(1)
            options[arg] = argv[i]
        else:
            args.append(arg)
        i += 1
    return (flags, options, args)


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv
    (flags, options, args) = parse_command_line(argv)

    if '--help' in flags:
        usage(sys.stdout)
        return 0

    # determine the input filename.
    if len(args) == 0:
        sys.stderr.write("Error: no input filename given.\n")
        usage(sys.stderr)
        return 1
    if len(args) > 1:
        sys.stderr.write(
            "Error: only one input filename is supported, multiple given: %s\n" % args
        )
        usage(sys.stderr)
        return 1
    src_fname = args[0]
    sys.stderr.write(f"Input: {src_fname}\n")

    indent = 4
    if '--indent' in options:
        try:
            indent = int(options['--indent'])
        except ValueError:
            sys.stderr.write(f"Error: --indent expects an integer, got '{options['--indent']}'.\n")
            return 1

    try:
        source = driver.read_source(src_fname)
    except OSError as e:
        sys.stderr.write(f"Error: can't read '{src_fname}': {e.strerror}\n")
        return 1
    except UnicodeDecodeError as e:
        sys.stderr.write(f"Error: can't read '{src_fname}': not valid UTF-8 ({e.reason} at byte {e.start})\n")
        return 1

    try:
        tokens = lexer.tokenize(source)
        if '--tokens' in flags:
            # dump the tokens and exit.
            print(serialization.to_exprs_str(tokens, indent=indent))
            return 0
        if '--lex' in flags:
            return 0

        tree = parser.parse(tokens)
        if '--ast' in flags:
            # dump the syntax tree and exit.
            print(serialization.to_exprs_str(tree, indent=indent))
            return 0
        if '--parse' in flags:
            return 0

        js_text = driver.assemble(syntax_to_js.generate(tree))
    except CompileError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    except RecursionError:
        # each level of call nesting costs a few stack frames in the parser.
        sys.stderr.write("Error: program is nested too deeply.\n")
        return 1

    out_fname = options.get('-o', '-')
    if out_fname == '-':
        sys.stdout.write(js_text)
    else:
        try:
            with open(out_fname, 'w', encoding='utf-8') as fd:
                fd.write(js_text)
        except OSError as e:
            sys.stderr.write(f"Error: can't write '{out_fname}': {e.strerror}\n")
            return 1
        sys.stderr.write(f"Wrote: {out_fname}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
