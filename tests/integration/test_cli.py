"""
Integration tests for the catalog CLI commands.
"""


def test_list_watches(runner):
    result = runner.invoke(args=['list-watches'])
    lines = result.output.strip().splitlines()

    assert result.exit_code == 0
    assert lines[0] == 'ID: 1 Brand: Nomos, Model: Club Sport neomatik'
    assert lines[9] == 'ID: 10 Brand: Citizen, Model: Eco-Drive Chronograph'
    assert lines[-1] == 'Total watches: 10'


def test_show_watch(runner):
    result = runner.invoke(args=['show-watch', '5'])

    assert result.exit_code == 0
    assert 'Brand: Seiko' in result.output
    assert 'Model: Presage Cocktail Time' in result.output
    assert 'Price: 4500' in result.output
    assert '4,500' not in result.output
    assert 'Year: 2019' in result.output
    assert 'Is available: No' in result.output


def test_show_unknown_watch(runner):
    result = runner.invoke(args=['show-watch', '999'])

    assert result.exit_code == 1
    assert 'No watch found with ID 999' in result.output
