from sudoku_gui.app.main import main

if __name__ == "__main__":
    main()
