from arguably import ArgParser, ArgParserError


def main():
    parser = (
        ArgParser()
        .helptext("Usage: foobar...")
        .version("1.0")
        .flag("foo f")
        .option("bar b")
    )

    try:
        parser.parse()
    except ArgParserError as error:
        error.exit()

    if parser.found("foo"):
        print("Found --foo/-f flag.")

    if (value := parser.value("bar")) is not None:
        print("Found --bar/-b option with value: %s" % value)

    for arg in parser.args:
        print("Arg: %s" % arg)


if __name__ == '__main__':
    main()
