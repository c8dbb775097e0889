"""
handlers/step_handlers.py
--------------------------
One handler per demo step, plus DEMO_STEPS, the fixed order they run in:
Setup → Insert → Select → Update → Delete → Aggregate → Transaction → FinalDump.
"""

from db.init_db import create_tables
from handlers.formatting import display, heading, product_line, user_line
from services.demo_runner import DemoContext, Step
from services.demo_service import NEW_PRODUCT, NEW_USER


def setup_step(ctx: DemoContext) -> None:
    """Create and seed the tables."""
    create_tables(ctx.conn)


def insert_step(ctx: DemoContext) -> None:
    print(heading("1. INSERT Operations:"))
    result = ctx.service.insert_records()
    print(f"Inserted new user: {NEW_USER['name']} (ID: {result.user_id})")
    print(f"Inserted new product: {NEW_PRODUCT['name']} (ID: {result.product_id})")
    print()


def select_step(ctx: DemoContext) -> None:
    print(heading("2. SELECT Operations:"))

    print("All Users:")
    for user in ctx.service.all_users():
        print(user_line(user))
    print()

    print("Users older than 25:")
    for user in ctx.service.users_older_than(25):
        print(f"  {user.name} (Age: {user.age})")
    print()

    print("Products priced above $20:")
    for product in ctx.service.products_priced_above(20):
        print(product_line(product))
    print()


def update_step(ctx: DemoContext) -> None:
    print(heading("3. UPDATE Operations:"))
    result = ctx.service.apply_updates()
    print(f"Updated Alice Johnson's age to 29 (Rows: {result.users_updated})")
    print(f"Decreased Coffee Mug stock by 5 (Rows: {result.products_updated})")
    print()


def delete_step(ctx: DemoContext) -> None:
    print(heading("4. DELETE Operations:"))
    rows = ctx.service.delete_inserted_user()
    print(f"Deleted user: {NEW_USER['name']} (Rows: {rows})")
    print()


def aggregate_step(ctx: DemoContext) -> None:
    print(heading("5. Aggregate Functions:"))
    agg = ctx.service.aggregates()
    print(f"Total users: {agg.user_count}")
    print(f"Average user age: {display(agg.average_age, '{:.1f}')}")
    print(f"Total product stock: {display(agg.total_stock)}")
    print(f"Most expensive product: {display(agg.max_price, '${:.2f}')}")
    print()


def transaction_step(ctx: DemoContext) -> None:
    print(heading("6. Transaction Example:"))
    ctx.service.purchase_book()
    print("Transaction completed successfully!")
    print()


def final_dump_step(ctx: DemoContext) -> None:
    print(heading("7. Final Database State:"))

    print("Final Users:")
    for user in ctx.service.final_users():
        print(f"  {user}")

    print("\nFinal Products:")
    for product in ctx.service.final_products():
        print(product_line(product))


DEMO_STEPS: list[Step] = [
    Step("Setup", setup_step),
    Step("Insert", insert_step),
    Step("Select", select_step),
    Step("Update", update_step),
    Step("Delete", delete_step),
    Step("Aggregate", aggregate_step),
    Step("Transaction", transaction_step),
    Step("FinalDump", final_dump_step),
]
