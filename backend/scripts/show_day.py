import sys
import os

# Add parent directory to path to allow importing the shopbudget package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dotenv import load_dotenv
from shopbudget.client import ShoppingApi, ShoppingScreen, ViewState, render_day
from datetime import date

load_dotenv()


def main():
    day = sys.argv[1] if len(sys.argv) > 1 else date.today().isoformat()
    api = ShoppingApi(
        os.getenv("SHOPPING_API_BASE", ""),
        token=os.getenv("SHOPPING_API_TOKEN") or None,
    )
    screen = ShoppingScreen(api, ViewState(current_date=day))
    state = screen.refresh()
    print(render_day(state))
    return 1 if state.error else 0


if __name__ == "__main__":
    sys.exit(main())
