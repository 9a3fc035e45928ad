from datetime import date, timedelta


def create_drug(client, headers, name='Aspirin', unit_type='mg', default_dosage=500):
    response = client.post('/api/drugs', headers=headers, json={
        'name': name, 'unit_type': unit_type, 'default_dosage': default_dosage
    })
    assert response.status_code == 201, response.text
    return response.json()['drug']


def record(client, headers, drug_id, consumption_date, quantity=500, unit_type='mg', **extra):
    return client.post('/api/drugs/consumptions', headers=headers, json=dict(
        drug_id=drug_id, consumption_date=consumption_date, quantity=quantity, unit_type=unit_type, **extra
    ))


def test_create_and_list_drugs_ordered_by_name(client, user_headers):
    create_drug(client, user_headers, 'Vitamin D', 'pills', None)
    aspirin = create_drug(client, user_headers, 'Aspirin', 'mg', 500)

    response = client.get('/api/drugs', headers=user_headers)

    assert response.status_code == 200
    drugs = response.json()['drugs']
    assert [d['name'] for d in drugs] == ['Aspirin', 'Vitamin D']
    assert drugs[0]['id'] == aspirin['id']
    assert drugs[0]['unit_type'] == 'mg'
    assert drugs[0]['default_dosage'] == 500
    assert drugs[1]['unit_type'] == 'pills'
    assert drugs[1]['default_dosage'] is None


def test_create_drug_rejects_unknown_unit(client, user_headers):
    response = client.post('/api/drugs', headers=user_headers, json={'name': 'Aspirin', 'unit_type': 'grams'})

    assert response.status_code == 400
    assert 'unit_type' in response.json()['error']


def test_drugs_are_private(client, user_headers, other_headers):
    create_drug(client, user_headers)

    assert client.get('/api/drugs', headers=other_headers).json() == {'drugs': []}


def test_update_drug(client, user_headers, other_headers):
    drug = create_drug(client, user_headers)

    updated = client.put(f"/api/drugs/{drug['id']}", headers=user_headers, json={
        'name': 'Aspirin Forte', 'unit_type': 'pills', 'default_dosage': 1
    })
    foreign = client.put(f"/api/drugs/{drug['id']}", headers=other_headers, json={
        'name': 'Stolen', 'unit_type': 'pills'
    })

    assert updated.status_code == 200
    assert updated.json()['drug']['name'] == 'Aspirin Forte'
    assert updated.json()['drug']['unit_type'] == 'pills'
    assert foreign.status_code == 404
    assert foreign.json() == {'error': 'Drug not found'}


def test_record_consumption_defaults_timestamp_to_given_date(client, user_headers):
    drug = create_drug(client, user_headers)

    response = record(client, user_headers, drug['id'], '2024-01-15')

    assert response.status_code == 201
    consumption = response.json()['consumption']
    assert consumption['consumption_date'] == '2024-01-15'
    assert consumption['consumed_at'].startswith('2024-01-15T')
    assert consumption['quantity'] == 500
    assert consumption['unit_type'] == 'mg'
    assert consumption['drug_name'] == 'Aspirin'


def test_record_consumption_keeps_explicit_timestamp(client, user_headers):
    drug = create_drug(client, user_headers)

    response = record(client, user_headers, drug['id'], '2024-01-15', consumed_at='2024-01-15T08:30:00', notes='with food')

    consumption = response.json()['consumption']
    assert consumption['consumed_at'] == '2024-01-15T08:30:00'
    assert consumption['notes'] == 'with food'


def test_record_consumption_for_foreign_or_missing_drug_is_404(client, user_headers, other_headers):
    drug = create_drug(client, user_headers)

    foreign = record(client, other_headers, drug['id'], '2024-01-15')
    missing = record(client, other_headers, 9999, '2024-01-15')

    assert foreign.status_code == 404
    assert missing.status_code == 404
    assert foreign.json() == missing.json() == {'error': 'Drug not found'}


def test_record_consumption_requires_fields(client, user_headers):
    response = client.post('/api/drugs/consumptions', headers=user_headers, json={'drug_id': 1})

    assert response.status_code == 400


def test_multiple_consumptions_per_day_newest_first(client, user_headers):
    drug = create_drug(client, user_headers)
    record(client, user_headers, drug['id'], '2024-01-15', consumed_at='2024-01-15T08:00:00')
    record(client, user_headers, drug['id'], '2024-01-15', consumed_at='2024-01-15T20:00:00')
    record(client, user_headers, drug['id'], '2024-01-14', consumed_at='2024-01-14T23:00:00')

    consumptions = client.get('/api/drugs/consumptions', headers=user_headers).json()['consumptions']

    assert [c['consumed_at'] for c in consumptions] == [
        '2024-01-15T20:00:00', '2024-01-15T08:00:00', '2024-01-14T23:00:00'
    ]
    assert consumptions[0]['drug_unit_type'] == 'mg'


def test_consumption_listing_is_capped_without_range(client, user_headers):
    drug = create_drug(client, user_headers)
    start = date(2024, 1, 1)
    for offset in range(105):
        record(client, user_headers, drug['id'], (start + timedelta(days=offset)).isoformat())

    recent = client.get('/api/drugs/consumptions', headers=user_headers).json()['consumptions']
    ranged = client.get('/api/drugs/consumptions', headers=user_headers, params={
        'start_date': '2024-01-01', 'end_date': '2024-12-31'
    }).json()['consumptions']
    narrow = client.get('/api/drugs/consumptions', headers=user_headers, params={
        'start_date': '2024-01-01', 'end_date': '2024-01-10'
    }).json()['consumptions']

    assert len(recent) == 100
    assert len(ranged) == 105
    assert len(narrow) == 10


def test_consumption_listing_rejects_inverted_range(client, user_headers):
    response = client.get('/api/drugs/consumptions', headers=user_headers, params={
        'start_date': '2024-02-01', 'end_date': '2024-01-01'
    })

    assert response.status_code == 400


def test_delete_consumption(client, user_headers, other_headers):
    drug = create_drug(client, user_headers)
    consumption = record(client, user_headers, drug['id'], '2024-01-15').json()['consumption']

    foreign = client.delete(f"/api/drugs/consumptions/{consumption['id']}", headers=other_headers)
    own = client.delete(f"/api/drugs/consumptions/{consumption['id']}", headers=user_headers)
    again = client.delete(f"/api/drugs/consumptions/{consumption['id']}", headers=user_headers)

    assert foreign.status_code == 404
    assert own.status_code == 200
    assert own.json() == {'message': 'Consumption record deleted successfully'}
    assert again.status_code == 404


def test_schedule_upsert_keeps_one_row_per_drug(client, user_headers):
    drug = create_drug(client, user_headers)

    first = client.post('/api/drugs/schedules', headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'interval', 'interval_hours': 8
    })
    second = client.post('/api/drugs/schedules', headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'per_day', 'times_per_day': 3, 'notes': 'after meals'
    })

    assert first.status_code == 201
    assert second.status_code == 201
    schedules = client.get('/api/drugs/schedules', headers=user_headers).json()['schedules']
    assert len(schedules) == 1
    assert schedules[0]['id'] == first.json()['schedule']['id']
    assert schedules[0]['schedule_type'] == 'per_day'
    assert schedules[0]['times_per_day'] == 3
    assert schedules[0]['notes'] == 'after meals'
    assert schedules[0]['is_active'] is True
    assert schedules[0]['drug_name'] == 'Aspirin'


def test_schedule_validation(client, user_headers):
    drug = create_drug(client, user_headers)

    no_hours = client.post('/api/drugs/schedules', headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'interval'
    })
    zero_times = client.post('/api/drugs/schedules', headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'per_day', 'times_per_day': 0
    })
    bad_type = client.post('/api/drugs/schedules', headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'weekly'
    })

    assert no_hours.status_code == 400
    assert no_hours.json() == {'error': 'interval_hours must be a positive number for interval schedules'}
    assert zero_times.status_code == 400
    assert zero_times.json() == {'error': 'times_per_day must be a positive number for per_day schedules'}
    assert bad_type.status_code == 400


def test_schedule_for_foreign_drug_is_404(client, user_headers, other_headers):
    drug = create_drug(client, user_headers)

    response = client.post('/api/drugs/schedules', headers=other_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'interval', 'interval_hours': 6
    })

    assert response.status_code == 404


def test_update_and_delete_schedule_by_id(client, user_headers, other_headers):
    drug = create_drug(client, user_headers)
    schedule = client.post('/api/drugs/schedules', headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'interval', 'interval_hours': 8
    }).json()['schedule']

    updated = client.put(f"/api/drugs/schedules/{schedule['id']}", headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'interval', 'interval_hours': 12
    })
    foreign_delete = client.delete(f"/api/drugs/schedules/{schedule['id']}", headers=other_headers)
    deleted = client.delete(f"/api/drugs/schedules/{schedule['id']}", headers=user_headers)

    assert updated.json()['schedule']['interval_hours'] == 12
    assert foreign_delete.status_code == 404
    assert deleted.json() == {'message': 'Schedule deleted successfully'}
    assert client.get('/api/drugs/schedules', headers=user_headers).json() == {'schedules': []}


def test_delete_drug_cascades_to_consumptions_and_schedule(client, user_headers, other_headers):
    drug = create_drug(client, user_headers)
    other = create_drug(client, user_headers, 'Ibuprofen')
    record(client, user_headers, drug['id'], '2024-01-15')
    record(client, user_headers, other['id'], '2024-01-15')
    client.post('/api/drugs/schedules', headers=user_headers, json={
        'drug_id': drug['id'], 'schedule_type': 'per_day', 'times_per_day': 2
    })

    assert client.delete(f"/api/drugs/{drug['id']}", headers=other_headers).status_code == 404
    response = client.delete(f"/api/drugs/{drug['id']}", headers=user_headers)

    assert response.status_code == 200
    assert response.json() == {'message': 'Drug deleted successfully'}
    consumptions = client.get('/api/drugs/consumptions', headers=user_headers).json()['consumptions']
    assert [c['drug_id'] for c in consumptions] == [other['id']]
    assert client.get('/api/drugs/consumptions', headers=user_headers,
                      params={'drug_id': drug['id']}).json() == {'consumptions': []}
    assert client.get('/api/drugs/schedules', headers=user_headers).json() == {'schedules': []}


def test_today_summary_only_includes_today(client, user_headers):
    today = date.today()
    drug = create_drug(client, user_headers)
    procedure = client.post('/api/procedures', headers=user_headers, json={'name': 'Blood test'}).json()['procedure']
    record(client, user_headers, drug['id'], today.isoformat())
    record(client, user_headers, drug['id'], (today - timedelta(days=1)).isoformat())
    client.post('/api/procedures/records', headers=user_headers, json={
        'procedure_id': procedure['id'], 'procedure_date': today.isoformat()
    })

    response = client.get('/api/drugs/summary/today', headers=user_headers)

    assert response.status_code == 200
    summary = response.json()
    assert summary['date'] == today.isoformat()
    assert len(summary['consumptions']) == 1
    assert summary['consumptions'][0]['drug_name'] == 'Aspirin'
    assert len(summary['procedures']) == 1
    assert summary['procedures'][0]['procedure_name'] == 'Blood test'


def test_today_summary_is_per_user(client, user_headers, other_headers):
    drug = create_drug(client, user_headers)
    record(client, user_headers, drug['id'], date.today().isoformat())

    summary = client.get('/api/drugs/summary/today', headers=other_headers).json()

    assert summary['consumptions'] == []
    assert summary['procedures'] == []
