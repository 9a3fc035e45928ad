from sqlalchemy import text


def test_database_fills_defaults_for_raw_inserts(client):
    engine = client.app.state.engine

    with engine.begin() as connection:
        connection.execute(text(
            "INSERT INTO users (username, email, password_hash) VALUES ('raw', 'raw@example.com', 'x')"
        ))
        user_id = connection.execute(text("SELECT id FROM users WHERE username = 'raw'")).scalar_one()
        connection.execute(text(
            "INSERT INTO medical_procedures (user_id, name) VALUES (:user_id, 'Dialysis')"
        ), {'user_id': user_id})
        procedure_id = connection.execute(text("SELECT id FROM medical_procedures")).scalar_one()
        connection.execute(text(
            "INSERT INTO procedure_schedules (user_id, procedure_id, schedule_type, times_per_day) "
            "VALUES (:user_id, :procedure_id, 'per_day', 1)"
        ), {'user_id': user_id, 'procedure_id': procedure_id})

        created_at = connection.execute(text("SELECT created_at FROM users")).scalar_one()
        schedule = connection.execute(text("SELECT is_active, created_at FROM procedure_schedules")).one()

    assert created_at is not None
    assert schedule.is_active == 1
    assert schedule.created_at is not None
