from rich.pretty import pprint

from arguably import *


parser = (
    ArgParser()
    .helptext("help!")
    .version("v1.0")
    .option("file f")
    .flag("quiet q")
)


if __name__ == '__main__':
    try:
        parser.parse()
    except ArgParserError as error:
        pprint(error)
    else:
        pprint(parser)
