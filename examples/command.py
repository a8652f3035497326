from arguably import ArgParser, ArgParserError


def boo(name, parser):
    print("boo!")
    for arg in parser.args:
        print("%s arg: %s" % (name, arg))


def main():
    parser = (
        ArgParser()
        .helptext("Usage: foobar...")
        .version("1.0")
        .enable_help_command()
        .command("boo b", ArgParser()
            .helptext("Usage: foobar boo...")
            .flag("loud l")
            .callback(boo)
        )
    )

    try:
        parser.parse()
    except ArgParserError as error:
        error.exit()


if __name__ == '__main__':
    main()
