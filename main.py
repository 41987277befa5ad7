from dino_run.game import main


if __name__ == "__main__":
    main()
