def test_list_profiles(runner):
    result = runner.invoke(args=["list-profiles"])
    assert result.exit_code == 0
    assert "precision-auto-detailing\tPrecision Auto Detailing" in result.output


def test_list_profiles_keyed_repository(multi_app):
    result = multi_app.test_cli_runner().invoke(args=["list-profiles"])
    assert result.output.splitlines() == [
        "precision-auto-detailing\tPrecision Auto Detailing",
        "foam-brothers\tFoam Brothers Mobile Wash",
    ]


def test_export_pages_writes_home_and_shop(runner, client, tmp_path):
    result = runner.invoke(args=["export-pages", "--out", str(tmp_path)])
    assert result.exit_code == 0, result.output

    index = tmp_path / "index.html"
    shop = tmp_path / "shop" / "precision-auto-detailing" / "index.html"
    assert index.exists()
    assert shop.exists()
    assert shop.read_bytes() == client.get("/shop/precision-auto-detailing").data


def test_export_single_slug(runner, tmp_path):
    result = runner.invoke(args=["export-pages", "--out", str(tmp_path), "--slug", "demo"])
    assert result.exit_code == 0
    assert (tmp_path / "shop" / "demo" / "index.html").exists()


def test_export_fails_for_missing_profile(multi_app, tmp_path):
    result = multi_app.test_cli_runner().invoke(args=["export-pages", "--out", str(tmp_path), "--slug", "missing"])
    assert result.exit_code != 0
    assert "returned 404" in result.output
