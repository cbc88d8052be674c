"""
==============================================================================
Entry Point Tests
==============================================================================

End-to-end tests for the demonstration sequence.

==============================================================================
"""

import io

from inventory.main import main, run_demo
from inventory.schemas.common import ResultStatus


class TestDemo:
    """Tests for the demonstration run."""
    
    def test_final_catalog_state(self):
        """Test the catalog contents after the full sequence."""
        inventory = run_demo(io.StringIO())
        
        electronics = inventory.get_products_by_category("Electronics").products
        assert [(p.id, p.stock) for p in electronics] == [("1", 60)]
        
        assert inventory.get_products_by_category("Clothing").status == ResultStatus.EMPTY
        
        furniture = inventory.get_products_by_category("Furniture").products
        assert [p.id for p in furniture] == ["4"]
        
        groceries = inventory.get_products_by_category("Groceries").products
        assert [(p.id, p.name, p.stock) for p in groceries] == [("3", "Apple", 5)]
    
    def test_output_lines(self):
        """Test the status lines written for each step."""
        stream = io.StringIO()
        run_demo(stream)
        lines = stream.getvalue().splitlines()
        
        assert lines[0] == "Adding Products:"
        assert "Added: Product(id='1', name='Laptop', category='Electronics', stock=50)" in lines
        assert (
            'Alert: Product "Apple" is low in stock. Current stock: 5. Consider restocking.'
        ) in lines
        assert "Removed: Product(id='2', name='Chair', category='Furniture', stock=20)" in lines
        assert "Electronics: [Product(id='1', name='Laptop', category='Electronics', stock=10)]" in lines
        assert (
            "[Product(id='1', name='Laptop', category='Electronics', stock=10), "
            "Product(id='3', name='Apple', category='Groceries', stock=5)]"
        ) in lines
        assert "Added new product: Product(id='4', name='Table', category='Furniture', stock=30)" in lines
        assert (
            "Updated product with higher stock: "
            "Product(id='1', name='Laptop', category='Electronics', stock=60)"
        ) in lines
        assert "No products found in the category: 'Clothing'." in lines
        assert "Clothing: []" in lines
    
    def test_main_returns_zero(self, capsys):
        """Test the console entry point prints the run and exits cleanly."""
        assert main() == 0
        
        captured = capsys.readouterr()
        assert "After Merging:" in captured.out
