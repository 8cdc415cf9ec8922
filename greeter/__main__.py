import sys

def _probe(argv):
    from greeter.probe import main as probe_main
    return probe_main(argv)

def main():
    if sys.argv[1:2] == ["probe"]:
        sys.exit(_probe(sys.argv[2:]))
    from greeter.app import run
    run()

if __name__ == "__main__":
    main()
