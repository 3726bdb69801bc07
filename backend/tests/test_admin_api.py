from conftest import auth_header, make_assessment

def question(text="What is 2 + 2?", correct="B", **extra):
    q = {
        "question_text": text,
        "option_a": "3",
        "option_b": "4",
        "option_c": "5",
        "option_d": "22",
        "correct_answer": correct,
    }
    q.update(extra)
    return q

def new_assessment(**overrides):
    body = {
        "title": "Arithmetic",
        "description": "Adding things up",
        "skill_category": "Math",
        "questions": [question(), question("What is 3 * 3?", "D", points=4)],
    }
    body.update(overrides)
    return body

def test_students_are_refused(client, student):
    headers = auth_header(student)
    assert client.get("/api/admin/assessments", headers=headers).status_code == 403
    assert client.post("/api/admin/assessments", json=new_assessment(), headers=headers).status_code == 403
    assert client.get("/api/admin/users", headers=headers).status_code == 403
    r = client.get("/api/admin/analytics", headers=headers)
    assert r.status_code == 403
    assert r.json()["detail"] == "Admin access required"

def test_create_assessment(client, admin, student):
    r = client.post("/api/admin/assessments", json=new_assessment(), headers=auth_header(admin))

    assert r.status_code == 201
    assessment_id = r.json()["assessmentId"]

    r = client.get(f"/api/assessments/{assessment_id}", headers=auth_header(student))
    assert r.status_code == 200
    data = r.json()
    assert data["assessment"]["is_active"] is True
    assert data["assessment"]["skill_category"] == "Math"
    assert [(q["question_order"], q["points"]) for q in data["questions"]] == [(1, 1), (2, 4)]

def test_created_assessment_grades_submissions(client, admin, student):
    r = client.post("/api/admin/assessments", json=new_assessment(), headers=auth_header(admin))
    assessment_id = r.json()["assessmentId"]
    questions = client.get(f"/api/assessments/{assessment_id}", headers=auth_header(student)).json()["questions"]

    r = client.post(
        f"/api/assessments/{assessment_id}/submit",
        json={"answers": [{"questionId": questions[0]["id"], "answer": "A"}, {"questionId": questions[1]["id"], "answer": "D"}]},
        headers=auth_header(student),
    )
    result = r.json()["result"]
    assert result["score"] == 4
    assert result["totalScore"] == 5
    assert result["percentage"] == 80

def test_create_assessment_validation(client, admin):
    headers = auth_header(admin)
    assert client.post("/api/admin/assessments", json=new_assessment(questions=[]), headers=headers).status_code == 422
    assert client.post("/api/admin/assessments", json=new_assessment(title="  "), headers=headers).status_code == 422
    bad = new_assessment(questions=[question(correct="E")])
    assert client.post("/api/admin/assessments", json=bad, headers=headers).status_code == 422

def test_list_includes_inactive_with_counts(client, db, admin):
    make_assessment(db, [("A", 1), ("B", 1), ("C", 1)], title="Three")
    make_assessment(db, [], title="Empty", active=False)

    r = client.get("/api/admin/assessments", headers=auth_header(admin))

    assert r.status_code == 200
    counts = {a["title"]: a["question_count"] for a in r.json()}
    assert counts == {"Three": 3, "Empty": 0}

def test_list_users(client, admin, student):
    r = client.get("/api/admin/users", headers=auth_header(admin))

    assert r.status_code == 200
    users = r.json()
    assert {u["email"] for u in users} == {"admin@school.org", "student@school.org"}
    assert all("password" not in u for u in users)

def test_analytics(client, db, admin, student):
    prog = make_assessment(db, [("A", 1)], category="Programming")
    make_assessment(db, [("A", 1)], category="Math", title="Unused")
    qid = prog.questions[0].id
    headers = auth_header(student)
    url = f"/api/assessments/{prog.id}/submit"
    client.post(url, json={"answers": [{"questionId": qid, "answer": "A"}]}, headers=headers)
    client.post(url, json={"answers": [{"questionId": qid, "answer": "B"}]}, headers=headers)

    r = client.get("/api/admin/analytics", headers=auth_header(admin))

    assert r.status_code == 200
    data = r.json()
    assert data["totalUsers"] == 2
    assert data["totalAssessments"] == 2
    assert data["totalResults"] == 2
    assert data["skillStats"] == [{"skill_category": "Programming", "average_score": 50.0, "total_attempts": 2}]
