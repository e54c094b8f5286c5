from create_vite_tailwind.cli import create_vite_tailwind

if __name__ == "__main__":
    create_vite_tailwind()
